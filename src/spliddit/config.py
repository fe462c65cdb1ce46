"""Configuration for spliddit.

:class:`SplidditConfig` is a small dataclass capturing the knobs of the
classifier and the observability hooks.  The defaults reproduce the
classic behaviour: flags and skin-tone sequences are kept whole.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from spliddit.observability.metrics import MetricsHook


@dataclass(frozen=True)
class SplidditConfig:
    """Complete configuration for a :class:`~spliddit.splitter.Splitter`.

    Parameters
    ----------
    combine_flags:
        Keep two consecutive regional indicator symbols together as one
        4-unit flag.  When ``False`` each indicator is emitted on its own.
    combine_skin_tones:
        Keep a surrogate pair followed by a Fitzpatrick modifier together
        as one 4-unit element.  The preceding pair is **not** checked for
        being a valid emoji modifier base.
    metrics:
        A :class:`~spliddit.observability.metrics.MetricsHook`.  ``None``
        selects the no-op hook.
    log_lone_surrogates:
        Emit a warning record when the input contains surrogate code units
        that are not part of a well-formed pair.
    """

    # ── Classification ──────────────────────────────────────────────────
    combine_flags: bool = True

    combine_skin_tones: bool = True

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    log_lone_surrogates: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for f in dataclasses.fields(self):
            if f.name == "metrics":
                continue
            val = getattr(self, f.name)
            if not isinstance(val, bool):
                raise ValueError(f"{f.name} must be a bool, got {type(val).__name__}")

        if self.metrics is not None and not isinstance(self.metrics, MetricsHook):
            raise ValueError(
                f"metrics must implement increment/timing/gauge, got {type(self.metrics).__name__}"
            )
