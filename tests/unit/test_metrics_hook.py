"""Tests for the MetricsHook protocol and its wiring through Splitter.

Covers:
  - Protocol conformance (isinstance, structural subtyping)
  - NoopMetricsHook behaviour
  - Metric names and tags emitted by Splitter.segment
"""
from __future__ import annotations

import re

import pytest

from spliddit.observability.metrics import MetricsHook, NoopMetricsHook


class TestMetricsHookProtocol:
    """Verify structural subtyping for MetricsHook protocol."""

    def test_noop_is_instance_of_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_recording_hook_is_instance_of_protocol(self, metrics):
        assert isinstance(metrics, MetricsHook)

    def test_class_missing_method_is_not_instance(self):
        class Partial:
            def increment(self, name, value=1, tags=None):
                pass

        assert not isinstance(Partial(), MetricsHook)


class TestNoopMetricsHook:
    def test_all_methods_return_none(self):
        hook = NoopMetricsHook()
        assert hook.increment("spliddit.segment_calls_total") is None
        assert hook.timing("spliddit.segment_duration_ms", 1.5, tags={"mode": "chars"}) is None
        assert hook.gauge("spliddit.input_units", 3) is None

    def test_has_no_instance_dict(self):
        with pytest.raises(AttributeError):
            NoopMetricsHook().extra = 1  # type: ignore[attr-defined]


class TestSplitterMetrics:
    def _names(self, records):
        return [r["name"] for r in records]

    def test_chars_mode(self, recording_splitter, metrics):
        recording_splitter.segment("a😀🇦🇸🎅🏻")
        assert metrics.increments[0] == {
            "name": "spliddit.segment_calls_total",
            "value": 1,
            "tags": {"mode": "chars"},
        }
        clusters = {
            r["tags"]["kind"]: r["value"]
            for r in metrics.increments
            if r["name"] == "spliddit.clusters_total"
        }
        assert clusters == {"bmp": 1, "surrogate_pair": 1, "flag": 1, "skin_tone": 1}
        assert metrics.timings[0]["name"] == "spliddit.segment_duration_ms"
        assert metrics.timings[0]["tags"] == {"mode": "chars"}
        assert metrics.timings[0]["ms"] >= 0
        assert metrics.gauges == [
            {"name": "spliddit.input_units", "value": 11, "tags": None},
        ]

    def test_delimiter_mode(self, recording_splitter, metrics):
        recording_splitter.segment("a,b", ",")
        assert self._names(metrics.increments) == ["spliddit.segment_calls_total"]
        assert metrics.increments[0]["tags"] == {"mode": "delimiter"}
        assert metrics.timings[0]["tags"] == {"mode": "delimiter"}
        assert metrics.gauges == []

    def test_pattern_mode(self, recording_splitter, metrics):
        recording_splitter.segment("a,b", re.compile(","))
        assert metrics.increments[0]["tags"] == {"mode": "pattern"}

    def test_empty_input_emits_no_clusters(self, recording_splitter, metrics):
        assert recording_splitter.segment("") == []
        assert "spliddit.clusters_total" not in self._names(metrics.increments)
        assert metrics.gauges[0]["value"] == 0

    def test_no_metrics_on_invalid_argument(self, recording_splitter, metrics):
        from spliddit.errors import SplidditInvalidArgumentError

        with pytest.raises(SplidditInvalidArgumentError):
            recording_splitter.segment(None)
        assert metrics.increments == []
        assert metrics.timings == []
