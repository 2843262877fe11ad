"""Aggregation policies turning decoded records into metric samples.

Two policies exist and exactly one is applied per conversion:

- NamespaceStatsPolicy counts tracked kinds in one namespace and yields one
  sample per tracked kind, zero counts included.
- EventCountPolicy yields one unit sample per event about a Pod, labeled with
  the Pod's namespace. Nothing is summed.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from kubeopenmetrics.core.config import DEFAULT_CONFIG, ConverterConfig
from kubeopenmetrics.core.models import MetricSample, NamespaceStats, ResourceCollection


@dataclass(frozen=True)
class NamespaceStatsPolicy:
    """Count Pods, Deployments and Services of a single namespace."""

    namespace: str


@dataclass(frozen=True)
class EventCountPolicy:
    """Emit one sample per event whose involved object is a Pod."""


AggregationPolicy = NamespaceStatsPolicy | EventCountPolicy


def gather_namespace_stats(
    namespace: str,
    collection: ResourceCollection,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> NamespaceStats:
    """Count the records of each tracked kind.

    Records of any other kind are ignored.
    """
    stats = NamespaceStats.for_kinds(namespace, config.tracked_kinds)
    for record in collection:
        stats.increment(record.kind)
    return stats


def namespace_stats_samples(
    stats: NamespaceStats,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> list[MetricSample]:
    """Build one gauge sample per tracked kind, in tracked-kind order."""
    labels = {config.label_key: stats.namespace}
    return [
        MetricSample(
            name=config.tracked_kinds[kind].name,
            help=config.tracked_kinds[kind].help,
            value=count,
            type=config.metric_type,
            labels=dict(labels),
        )
        for kind, count in stats.counts.items()
    ]


def event_count_samples(
    collection: ResourceCollection,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> Iterator[MetricSample]:
    """Yield a unit sample for every event about the configured kind."""
    metric = config.event_metric
    for record in collection:
        involved = record.involved_object
        if involved is None or involved.kind != config.event_kind:
            continue
        yield MetricSample(
            name=metric.name,
            help=metric.help,
            value=1,
            type=config.metric_type,
            labels={config.label_key: involved.namespace},
        )


def aggregate(
    policy: AggregationPolicy,
    collection: ResourceCollection,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> list[MetricSample]:
    """Apply an aggregation policy to a decoded collection.

    Args:
        policy: NamespaceStatsPolicy or EventCountPolicy.
        collection: Decoded records.
        config: Tracked kinds and metric names.

    Returns:
        Metric samples in output order.

    Raises:
        TypeError: If policy is not a known aggregation policy.
    """
    if isinstance(policy, NamespaceStatsPolicy):
        stats = gather_namespace_stats(policy.namespace, collection, config)
        return namespace_stats_samples(stats, config)
    if isinstance(policy, EventCountPolicy):
        return list(event_count_samples(collection, config))
    raise TypeError(f"unknown aggregation policy: {policy!r}")
