"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST emit
key-value context rather than formatted strings.

Log Levels:
    - DEBUG: Cache hits/misses, rule outcomes (dev only)
    - INFO: Detector construction, configuration in effect
    - WARNING: Fail-open paths (enricher swallowed a parse error)
    - ERROR: Construction failed, process continues without a detector
    - CRITICAL: Not used by the detector itself

Security:
    - User-agent strings are client-controlled; truncate before logging.

Usage:
    from uadetect.core.container import get_logger

    logger = get_logger()
    logger.debug("Detection cache hit", user_agent=user_agent[:100])

    scoped = logger.bind(component="device_detector")
    scoped.info("Detector ready", cache_ttl=None)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
