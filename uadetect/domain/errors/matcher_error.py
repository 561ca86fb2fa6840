"""Matcher error types for domain protocol contracts.

A matcher adapter validates its signature table when it is built. A table
that cannot be compiled makes the matcher unavailable, which is fatal for
detector construction and never happens per call.

Usage:
    from uadetect.domain.errors import MatcherUnavailableError
    from uadetect.core.result import Failure

    return Failure(error=MatcherUnavailableError(
        code=ErrorCode.MATCHER_SIGNATURES_INVALID,
        message="Invalid vendor fragment pattern",
        matcher_name="vendor_fragment",
    ))
"""

from dataclasses import dataclass

from uadetect.core.errors import ConfigurationError, DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class MatcherUnavailableError(DomainError):
    """A required matcher could not be constructed.

    Attributes:
        code: ErrorCode (MATCHER_SIGNATURES_INVALID or MATCHER_UNAVAILABLE).
        message: Human-readable message.
        matcher_name: Which matcher failed ("client", "os", "device", ...).
        details: Offending pattern and compiler message.
    """

    matcher_name: str


type DetectorError = ConfigurationError | MatcherUnavailableError
