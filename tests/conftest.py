"""Shared test fixtures for all test modules."""

import json
from collections.abc import Callable

import pytest

from kubeopenmetrics.adapters.clock import FixedClock

# 2018-10-04T17:46:51Z in nanoseconds
FIXED_NOW_NS = 1538675211000000000


class RecordingReporter:
    """ErrorReporter that keeps every reported error."""

    def __init__(self) -> None:
        self.errors: list[Exception] = []

    def __call__(self, error: Exception) -> None:
        self.errors.append(error)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock starting at FIXED_NOW_NS and advancing 1ns per read."""
    return FixedClock(FIXED_NOW_NS, step=1)


@pytest.fixture
def reporter() -> RecordingReporter:
    """Provide a reporter that records decode failures."""
    return RecordingReporter()


@pytest.fixture
def resource_list_json() -> Callable[..., str]:
    """Factory fixture building a resource list document from kinds.

    Usage:
        raw = resource_list_json("Pod", "Pod", "Service")
    """

    def _build(*kinds: str) -> str:
        return json.dumps({"items": [{"kind": kind} for kind in kinds]})

    return _build


@pytest.fixture
def event_list_json() -> Callable[..., str]:
    """Factory fixture building an event list from (kind, namespace) pairs."""

    def _build(*objects: tuple[str, str]) -> str:
        items = [
            {
                "kind": "Event",
                "involvedObject": {"kind": kind, "namespace": namespace},
            }
            for kind, namespace in objects
        ]
        return json.dumps({"items": items})

    return _build
