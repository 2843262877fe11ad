"""Conversion pipeline: decode, aggregate, encode.

The pipeline never raises on bad input. Decode failures are handed to the
error reporter and the conversion continues with an empty collection, which
gives an empty result.

Collaborators are passed in through the ports; default wiring lives in
``kubeopenmetrics.adapters.exporter``.
"""

import logging

from kubeopenmetrics.core.aggregation import (
    AggregationPolicy,
    EventCountPolicy,
    aggregate,
)
from kubeopenmetrics.core.config import DEFAULT_CONFIG, ConverterConfig
from kubeopenmetrics.core.decoding import decode_collection
from kubeopenmetrics.core.encoding.openmetrics import encode_samples
from kubeopenmetrics.core.errors import DecodeError
from kubeopenmetrics.core.models import ResourceCollection
from kubeopenmetrics.core.ports import Clock, ErrorReporter

logger = logging.getLogger(__name__)


def _decode_or_report(raw: str | bytes, reporter: ErrorReporter) -> ResourceCollection:
    try:
        return decode_collection(raw)
    except DecodeError as e:
        reporter(e)
        return ResourceCollection()


def convert(
    raw: str | bytes,
    policy: AggregationPolicy,
    *,
    clock: Clock,
    reporter: ErrorReporter,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> str:
    """Convert a JSON resource or event list to OpenMetrics text.

    Args:
        raw: JSON document shaped ``{"items": [...]}``.
        policy: NamespaceStatsPolicy or EventCountPolicy.
        clock: Time source for event timestamps. Only EventCountPolicy reads
            it; namespace-stats samples carry no timestamp and the clock is
            ignored for them.
        reporter: Receives decode failures.
        config: Metric names and formatting switches.

    Returns:
        OpenMetrics text, one HELP/TYPE/sample triple per sample. Empty string
        when the input holds no items or cannot be decoded.
    """
    collection = _decode_or_report(raw, reporter)
    if not collection:
        return ""

    samples = aggregate(policy, collection, config)
    logger.debug(
        "aggregated %d records into %d samples", len(collection), len(samples)
    )

    if isinstance(policy, EventCountPolicy):
        return encode_samples(
            samples,
            trailing_comma=config.event_label_trailing_comma,
            clock=clock,
        )
    return encode_samples(samples)
