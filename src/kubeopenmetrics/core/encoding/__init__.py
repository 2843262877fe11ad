"""Text encoders for metric samples."""

from kubeopenmetrics.core.encoding.openmetrics import encode_sample, encode_samples

__all__ = ["encode_sample", "encode_samples"]
