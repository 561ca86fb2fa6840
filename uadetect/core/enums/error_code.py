"""Machine-readable error codes.

Codes follow the SUBJECT_REASON naming convention and travel inside
DomainError values (Result types), never inside raised exceptions.

Categories:
- Configuration errors (INVALID_*, CONFIGURATION_*)
- Collaborator errors (MATCHER_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Configuration errors
    INVALID_VERSION_TRUNCATION = "invalid_version_truncation"
    INVALID_CACHE_TTL = "invalid_cache_ttl"
    INVALID_CACHE_CAPACITY = "invalid_cache_capacity"
    CONFIGURATION_INVALID = "configuration_invalid"

    # Collaborator errors
    MATCHER_SIGNATURES_INVALID = "matcher_signatures_invalid"
    MATCHER_UNAVAILABLE = "matcher_unavailable"
