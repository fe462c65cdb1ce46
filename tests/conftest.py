"""Shared test fixtures for the spliddit test suite."""

from __future__ import annotations

from typing import Any

import pytest

from spliddit.config import SplidditConfig
from spliddit.splitter import Splitter


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})


@pytest.fixture
def config() -> SplidditConfig:
    """Default configuration: flags and skin tones combined."""
    return SplidditConfig()


@pytest.fixture
def splitter(config: SplidditConfig) -> Splitter:
    return Splitter(config)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def recording_splitter(metrics: RecordingMetricsHook) -> Splitter:
    """Splitter wired to a :class:`RecordingMetricsHook`."""
    return Splitter(SplidditConfig(metrics=metrics))
