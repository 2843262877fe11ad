"""Conversion settings: tracked kinds, metric names and formatting switches."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

POD = "Pod"
DEPLOYMENT = "Deployment"
SERVICE = "Service"


@dataclass(frozen=True)
class MetricSpec:
    """Name and HELP text of an emitted metric."""

    name: str
    help: str


DEFAULT_TRACKED_KINDS: Mapping[str, MetricSpec] = MappingProxyType(
    {
        POD: MetricSpec("pods", "Number of pods in any state, for example running"),
        DEPLOYMENT: MetricSpec("deployments", "Number of deployments"),
        SERVICE: MetricSpec("services", "Number of services"),
    }
)

DEFAULT_EVENT_METRIC = MetricSpec(
    "pod_count_all", "Number of pods in any state (running, terminating, etc.)"
)


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration options for the conversion pipeline.

    Attributes:
        tracked_kinds: Resource kinds counted by the namespace-stats policy,
            mapped to the metric each one is exposed as. Iteration order is
            the output order.
        event_kind: Involved-object kind counted by the event policy.
        event_metric: Metric emitted once per matching event.
        metric_type: TYPE of every emitted metric.
        label_key: Label carrying the namespace.
        event_label_trailing_comma: Keep the comma after the last label on
            event lines (``{namespace="krs",}``), as existing scrapers expect.
    """

    tracked_kinds: Mapping[str, MetricSpec] = field(
        default_factory=lambda: DEFAULT_TRACKED_KINDS
    )
    event_kind: str = POD
    event_metric: MetricSpec = DEFAULT_EVENT_METRIC
    metric_type: str = "gauge"
    label_key: str = "namespace"
    event_label_trailing_comma: bool = True


DEFAULT_CONFIG = ConverterConfig()
