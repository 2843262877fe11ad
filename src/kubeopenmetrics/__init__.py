"""Convert Kubernetes resource and event lists to OpenMetrics text."""

from kubeopenmetrics.adapters.clock import FixedClock, SystemClock
from kubeopenmetrics.adapters.logging import LoggingErrorReporter
from kubeopenmetrics.core.aggregation import (
    AggregationPolicy,
    EventCountPolicy,
    NamespaceStatsPolicy,
)
from kubeopenmetrics.core.config import DEFAULT_CONFIG, ConverterConfig, MetricSpec
from kubeopenmetrics.core.decoding import decode_collection
from kubeopenmetrics.core.encoding.openmetrics import encode_sample, encode_samples
from kubeopenmetrics.core.errors import DecodeError
from kubeopenmetrics.core.models import (
    InvolvedObject,
    MetricSample,
    NamespaceStats,
    ResourceCollection,
    ResourceRecord,
)
from kubeopenmetrics.adapters.exporter import (
    convert,
    events_to_openmetrics,
    namespace_stats_to_openmetrics,
)

__all__ = [
    "DEFAULT_CONFIG",
    "AggregationPolicy",
    "ConverterConfig",
    "DecodeError",
    "EventCountPolicy",
    "FixedClock",
    "InvolvedObject",
    "LoggingErrorReporter",
    "MetricSample",
    "MetricSpec",
    "NamespaceStats",
    "NamespaceStatsPolicy",
    "ResourceCollection",
    "ResourceRecord",
    "SystemClock",
    "convert",
    "decode_collection",
    "encode_sample",
    "encode_samples",
    "events_to_openmetrics",
    "namespace_stats_to_openmetrics",
]
