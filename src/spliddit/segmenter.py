"""Split a string into perceived characters.

The string is turned into its UTF-16 code-unit buffer once; an indexed
loop then asks :func:`~spliddit.classifier.classify` how many units the
character at the cursor spans, decodes exactly that slice and advances.
Random lookahead of up to four units is needed, so the buffer is fully
materialised rather than streamed.
"""

from __future__ import annotations

from collections import Counter

from spliddit.classifier import classify
from spliddit.config import SplidditConfig
from spliddit.models import ClusterKind
from spliddit.observability import get_logger
from spliddit.utils.surrogates import (
    count_unpaired_surrogates,
    from_code_units,
    to_code_units,
)

log = get_logger("spliddit.segmenter")

_DEFAULT_CONFIG = SplidditConfig()


def split_into_chars(
    text: str,
    config: SplidditConfig | None = None,
    *,
    tally: Counter[ClusterKind] | None = None,
) -> list[str]:
    """Return the perceived characters of *text*, in order.

    Parameters
    ----------
    text:
        The string to segment.
    config:
        Classifier toggles and logging options.
    tally:
        If given, incremented once per emitted element under its
        :class:`~spliddit.models.ClusterKind`.

    Returns
    -------
    list[str]
        Non-empty elements whose UTF-16 units, concatenated, are exactly
        the units of *text*.  An empty *text* yields ``[]``.

    Examples
    --------
    >>> split_into_chars("abc\\U0001f624def")
    ['a', 'b', 'c', '😤', 'd', 'e', 'f']
    """
    cfg = config or _DEFAULT_CONFIG
    units = to_code_units(text)
    length = len(units)

    if cfg.log_lone_surrogates and _has_surrogate_code_points(text):
        _warn_unpaired(units)

    result: list[str] = []
    i = 0
    while i < length:
        kind = classify(units, i, cfg)
        increment = kind.width
        result.append(from_code_units(units[i : i + increment]))
        if tally is not None:
            tally[kind] += 1
        i += increment

    return result


def _has_surrogate_code_points(text: str) -> bool:
    # Surrogate code-points are the only thing UTF-8 refuses to encode.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def _warn_unpaired(units) -> None:
    lone = count_unpaired_surrogates(units)
    if lone:
        log.warning(
            "Unpaired surrogate units in input",
            extra={
                "extra_fields": {
                    "op": "split_into_chars",
                    "lone_surrogates": lone,
                    "units": len(units),
                }
            },
        )
