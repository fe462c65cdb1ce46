"""Metrics hook protocol and no-op default implementation.

spliddit emits counters, timings, and gauges for every call to
:func:`spliddit.segment`.  By default a :class:`NoopMetricsHook` is used so
there is zero overhead.  Users can supply their own implementation that
satisfies the :class:`MetricsHook` protocol via
:attr:`SplidditConfig.metrics <spliddit.config.SplidditConfig.metrics>`.

Emitted metric names:

* ``spliddit.segment_calls_total``   -- counter, tag ``mode``
* ``spliddit.clusters_total``        -- counter, tag ``kind``
* ``spliddit.segment_duration_ms``   -- timing, tag ``mode``
* ``spliddit.input_units``           -- gauge
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric.

        Parameters
        ----------
        name:
            Dot-delimited metric name, e.g. ``"spliddit.clusters_total"``.
        value:
            Amount to increment by.  Defaults to ``1``.
        tags:
            Optional key-value tags for the data point.
        """
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a timing / duration metric in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that silently discards all data points.

    Used when the caller does not supply a :class:`MetricsHook`, so call
    sites never need ``if metrics is not None`` guards.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
