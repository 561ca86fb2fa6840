"""Domain errors.

Usage:
    from uadetect.domain.errors import DetectorError, MatcherUnavailableError
"""

from uadetect.domain.errors.matcher_error import DetectorError, MatcherUnavailableError

__all__ = ["DetectorError", "MatcherUnavailableError"]
