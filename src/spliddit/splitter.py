"""Public entry point: normalise input, then segment or split.

:func:`segment` accepts either a string or a list / tuple of strings (for
example a string that was already split one UTF-16 unit at a time).  A
sequence is joined back into one string first.

* With a compiled :class:`re.Pattern` delimiter, ``pattern.split`` is
  returned unchanged.
* With a non-empty string delimiter, ``str.split`` is returned unchanged:
  the delimiter is removed and empty leading / trailing / adjacent items
  are kept.
* Without a delimiter (``None`` or ``""``) the string is segmented into
  perceived characters by :func:`~spliddit.segmenter.split_into_chars`.
"""

from __future__ import annotations

import re
import time
from collections import Counter
from collections.abc import Sequence
from typing import Any, Union

from spliddit.config import SplidditConfig
from spliddit.errors import SplidditInvalidArgumentError
from spliddit.models import ClusterKind
from spliddit.observability import NoopMetricsHook, get_logger
from spliddit.segmenter import split_into_chars

log = get_logger("spliddit.splitter")

Delimiter = Union[str, re.Pattern, None]


def _invalid(message: str, **context: Any) -> SplidditInvalidArgumentError:
    log.warning(
        "Invalid argument",
        extra={"extra_fields": {"op": "segment", **context}},
    )
    return SplidditInvalidArgumentError(message, context=context)


def _normalize(value: Any) -> str:
    """Return *value* as one string, joining list / tuple input."""
    if value is None:
        raise _invalid(
            "value cannot be None",
            argument="value",
            received_type="NoneType",
        )
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if not isinstance(item, str):
                raise _invalid(
                    f"value[{index}] must be a str, got {type(item).__name__}",
                    argument="value",
                    received_type=type(item).__name__,
                    index=index,
                )
        return "".join(value)
    raise _invalid(
        f"value must be a str or a sequence of str, got {type(value).__name__}",
        argument="value",
        received_type=type(value).__name__,
    )


class Splitter:
    """Reusable segmenter bound to one :class:`SplidditConfig`.

    Parameters
    ----------
    config:
        Configuration to use.  If omitted, one is built from *kwargs*.
    **kwargs:
        Forwarded to :class:`SplidditConfig` when *config* is ``None``.

    A ``Splitter`` holds no per-call state and may be shared between
    threads.
    """

    def __init__(self, config: SplidditConfig | None = None, **kwargs: Any) -> None:
        if config is not None and kwargs:
            raise TypeError("pass either config or keyword options, not both")
        self._config = config if config is not None else SplidditConfig(**kwargs)
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    @property
    def config(self) -> SplidditConfig:
        return self._config

    def segment(self, value: str | Sequence[str], delimiter: Delimiter = None) -> list[str]:
        """Split *value* by *delimiter*, or into perceived characters.

        Parameters
        ----------
        value:
            A string, or a list / tuple of strings that is joined first.
        delimiter:
            A non-empty string or a compiled pattern to split on.  ``None``
            and ``""`` select perceived-character segmentation.

        Returns
        -------
        list[str]

        Raises
        ------
        SplidditInvalidArgumentError
            If *value* is ``None``, not a string or sequence of strings, or
            if *delimiter* is of an unsupported type.
        """
        text = _normalize(value)

        if isinstance(delimiter, re.Pattern):
            return self._timed("pattern", lambda: delimiter.split(text))
        if isinstance(delimiter, str):
            if delimiter:
                return self._timed("delimiter", lambda: text.split(delimiter))
        elif delimiter is not None:
            raise _invalid(
                f"delimiter must be a str or re.Pattern, got {type(delimiter).__name__}",
                argument="delimiter",
                received_type=type(delimiter).__name__,
            )

        tally: Counter[ClusterKind] = Counter()
        result = self._timed(
            "chars", lambda: split_into_chars(text, self._config, tally=tally),
        )
        for kind, count in tally.items():
            self._metrics.increment(
                "spliddit.clusters_total", count, tags={"kind": kind.value},
            )
        self._metrics.gauge("spliddit.input_units", sum(k.width * c for k, c in tally.items()))
        return result

    def _timed(self, mode: str, fn) -> list[str]:
        tags = {"mode": mode}
        self._metrics.increment("spliddit.segment_calls_total", tags=tags)
        t0 = time.monotonic()
        result = fn()
        elapsed_ms = (time.monotonic() - t0) * 1000
        self._metrics.timing("spliddit.segment_duration_ms", elapsed_ms, tags=tags)
        return result


_default_splitter = Splitter()


def segment(
    value: str | Sequence[str],
    delimiter: Delimiter = None,
    *,
    config: SplidditConfig | None = None,
) -> list[str]:
    """Split *value* into perceived characters, or by *delimiter*.

    Convenience wrapper around :meth:`Splitter.segment`.

    Examples
    --------
    >>> segment("abc\\U0001f624def")
    ['a', 'b', 'c', '😤', 'd', 'e', 'f']
    >>> segment("\\U0001f1e6\\U0001f1f8")
    ['🇦🇸']
    >>> segment("abc", "b")
    ['a', 'c']
    >>> segment("")
    []
    """
    splitter = _default_splitter if config is None else Splitter(config)
    return splitter.segment(value, delimiter)
