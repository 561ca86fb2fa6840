"""Core enums package.

Usage:
    from uadetect.core.enums import ErrorCode, Environment
"""

from uadetect.core.enums.environment import Environment
from uadetect.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
