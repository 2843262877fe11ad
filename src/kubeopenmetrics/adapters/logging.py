"""Standard library logging adapter for the ErrorReporter port.

Decode failures are logged as WARNING records carrying structured ``extra``
fields, so handlers and formatters can pick out the exception details.
"""

import logging
import sys
import traceback

from kubeopenmetrics.core.errors import DecodeError

_DEFAULT_LOGGER_NAME = "kubeopenmetrics"


class LoggingErrorReporter:
    """ErrorReporter that writes decode failures to a logging.Logger.

    Example:
        ```python
        reporter = LoggingErrorReporter(logging.getLogger("exporter"))
        text = namespace_stats_to_openmetrics("krs", raw, reporter=reporter)
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.WARNING,
    ) -> None:
        """Initialize the reporter.

        Args:
            logger: Logger to write to. Defaults to the "kubeopenmetrics" logger.
            level: Level of the emitted records (default WARNING).
        """
        self._logger = logger or logging.getLogger(_DEFAULT_LOGGER_NAME)
        self._level = level

    def __call__(self, error: Exception) -> None:
        """Log a decode failure. Never raises."""
        extra: dict[str, str] = {
            "exc_type": type(error).__name__,
            "exc_message": str(error),
        }
        if isinstance(error, DecodeError):
            extra["reason"] = error.reason
        try:
            self._logger.log(
                self._level,
                "failed to decode resource list: %s",
                error,
                extra=extra,
            )
        except Exception:
            # Same fallback as logging.Handler.handleError().
            traceback.print_exc(file=sys.stderr)
