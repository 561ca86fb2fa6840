"""Error classes shared across layers.

Error Types:
- ConfigurationError: Detector settings rejected at construction time

Usage:
    from uadetect.core.errors import ConfigurationError
    from uadetect.core.enums import ErrorCode
    from uadetect.core.result import Failure

    return Failure(error=ConfigurationError(
        code=ErrorCode.INVALID_VERSION_TRUNCATION,
        message="version_truncation must be one of 0, 1, 2, 3 or None",
        field="version_truncation",
    ))
"""

from dataclasses import dataclass

from uadetect.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(DomainError):
    """Invalid detector configuration.

    Reported once, when a detector is built. Never produced per call.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Settings field that failed validation.
        details: Additional context.
    """

    field: str | None = None
