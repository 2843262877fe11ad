"""Adapters implementing the core ports."""

from kubeopenmetrics.adapters.clock import FixedClock, SystemClock
from kubeopenmetrics.adapters.logging import LoggingErrorReporter

__all__ = ["FixedClock", "LoggingErrorReporter", "SystemClock"]
