"""Conversion entry points wired to the default adapters.

Fills in the system clock and the logging error reporter for any
collaborator the caller leaves out, then runs the core pipeline.
"""

from kubeopenmetrics.adapters.clock import SystemClock
from kubeopenmetrics.adapters.logging import LoggingErrorReporter
from kubeopenmetrics.core import pipeline
from kubeopenmetrics.core.aggregation import (
    AggregationPolicy,
    EventCountPolicy,
    NamespaceStatsPolicy,
)
from kubeopenmetrics.core.config import DEFAULT_CONFIG, ConverterConfig
from kubeopenmetrics.core.ports import Clock, ErrorReporter


def convert(
    raw: str | bytes,
    policy: AggregationPolicy,
    *,
    clock: Clock | None = None,
    reporter: ErrorReporter | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Convert a JSON resource or event list to OpenMetrics text.

    Args:
        raw: JSON document shaped ``{"items": [...]}``.
        policy: NamespaceStatsPolicy or EventCountPolicy.
        clock: Time source for event timestamps. Defaults to SystemClock.
            Ignored by NamespaceStatsPolicy, whose samples have no timestamp.
        reporter: Receives decode failures. Defaults to LoggingErrorReporter.
        config: Metric names and formatting switches. Defaults to DEFAULT_CONFIG.

    Returns:
        OpenMetrics text. Empty string when the input holds no items or cannot
        be decoded.
    """
    return pipeline.convert(
        raw,
        policy,
        clock=clock or SystemClock(),
        reporter=reporter or LoggingErrorReporter(),
        config=config or DEFAULT_CONFIG,
    )


def namespace_stats_to_openmetrics(
    namespace: str,
    raw: str | bytes,
    *,
    reporter: ErrorReporter | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Count Pods, Deployments and Services of a namespace as gauges.

    Example:
        ```python
        text = namespace_stats_to_openmetrics("krs", kubectl_json)
        # pods{namespace="krs"} 2
        ```
    """
    return convert(
        raw, NamespaceStatsPolicy(namespace), reporter=reporter, config=config
    )


def events_to_openmetrics(
    raw: str | bytes,
    *,
    clock: Clock | None = None,
    reporter: ErrorReporter | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Emit one timestamped ``pod_count_all`` sample per Pod event."""
    return convert(
        raw, EventCountPolicy(), clock=clock, reporter=reporter, config=config
    )
