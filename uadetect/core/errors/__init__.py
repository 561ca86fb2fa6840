"""Core errors package.

Usage:
    from uadetect.core.errors import DomainError, ConfigurationError
"""

from uadetect.core.enums import ErrorCode
from uadetect.core.errors.common_errors import ConfigurationError
from uadetect.core.errors.domain_error import DomainError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "ErrorCode",
]
