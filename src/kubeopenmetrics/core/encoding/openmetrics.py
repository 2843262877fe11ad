"""OpenMetrics text encoder for metric samples.

Each sample is rendered as a HELP/TYPE/sample triple, for example::

    # HELP pod_count_all Number of pods in any state (running, terminating, etc.)
    # TYPE pod_count_all gauge
    pod_count_all{namespace="krs",} 1 1538675211000000000
"""

import dataclasses
from collections.abc import Iterable, Mapping

from kubeopenmetrics.core.models import MetricSample
from kubeopenmetrics.core.ports import Clock


def _format_value(value: int | float) -> str:
    """Render a sample value as a decimal string, without a trailing .0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_labels(labels: Mapping[str, str], trailing_comma: bool) -> str:
    """Render a label set as ``{k="v",...}``, or nothing when empty."""
    if not labels:
        return ""
    pairs = [f'{key}="{value}"' for key, value in labels.items()]
    body = ",".join(pairs)
    if trailing_comma:
        body += ","
    return "{" + body + "}"


def encode_sample(sample: MetricSample, *, trailing_comma: bool = False) -> str:
    """Encode one metric sample in OpenMetrics text format.

    Args:
        sample: The sample to encode.
        trailing_comma: Emit a comma after the last label as well.

    Returns:
        HELP, TYPE and sample lines, each newline-terminated. The sample
        timestamp (nanoseconds) is appended when set.
    """
    line = f"{sample.name}{_format_labels(sample.labels, trailing_comma)}"
    line += f" {_format_value(sample.value)}"
    if sample.timestamp is not None:
        line += f" {sample.timestamp}"
    return (
        f"# HELP {sample.name} {sample.help}\n"
        f"# TYPE {sample.name} {sample.type}\n"
        f"{line}\n"
    )


def encode_samples(
    samples: Iterable[MetricSample],
    *,
    trailing_comma: bool = False,
    clock: Clock | None = None,
) -> str:
    """Encode metric samples in order and concatenate them.

    Args:
        samples: Samples to encode.
        trailing_comma: Passed through to encode_sample().
        clock: When given, each sample is stamped with the clock's current
            time as it is encoded. The clock is read once per sample.

    Returns:
        Concatenated OpenMetrics text. Empty string if no samples.
    """
    parts = []
    for sample in samples:
        if clock is not None:
            sample = dataclasses.replace(sample, timestamp=clock.now_ns())
        parts.append(encode_sample(sample, trailing_comma=trailing_comma))
    return "".join(parts)
