"""User-agent pattern matching primitive.

Patterns are regular expressions anchored to a token boundary: the match
must start at the beginning of the string or right after a separator, so
"Touch" matches "Trident/7.0; Touch;" but not "NoTouchScreen". Matching is
case-insensitive. Compiled patterns are memoized per process.

Usage:
    from uadetect.infrastructure.matchers.pattern import user_agent_matches

    if user_agent_matches("Opera TV Store", user_agent):
        ...
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from uadetect.core.enums import ErrorCode
from uadetect.core.result import Failure, Result, Success
from uadetect.domain.errors import MatcherUnavailableError

TOKEN_BOUNDARY = r"(?:^|[^A-Z0-9\-_]|[^A-Z0-9\-]_|sprd-)"


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a signature pattern with the token-boundary prefix.

    Args:
        pattern: Regular expression (alternation and lookahead allowed).

    Returns:
        re.Pattern[str]: Case-insensitive compiled pattern.

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    return re.compile(f"{TOKEN_BOUNDARY}(?:{pattern})", re.IGNORECASE)


def user_agent_matches(pattern: str, user_agent: str) -> bool:
    """Check whether a user agent contains a signature.

    Args:
        pattern: Signature pattern.
        user_agent: Raw user-agent string.

    Returns:
        bool: True if the pattern occurs at a token boundary.
    """
    return compile_pattern(pattern).search(user_agent) is not None


def compile_signatures(
    patterns: Iterable[str], *, matcher_name: str
) -> Result[list[re.Pattern[str]], MatcherUnavailableError]:
    """Compile a matcher's signature table up front.

    Used by matcher factories so a broken table fails detector construction
    instead of the first detect() call.

    Args:
        patterns: Signature patterns in table order.
        matcher_name: Matcher reported in the error.

    Returns:
        Success with compiled patterns (same order), Failure with
        MatcherUnavailableError naming the first invalid pattern.
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(compile_pattern(pattern))
        except re.error as exc:
            return Failure(
                error=MatcherUnavailableError(
                    code=ErrorCode.MATCHER_SIGNATURES_INVALID,
                    message=f"Invalid signature pattern in {matcher_name} matcher",
                    matcher_name=matcher_name,
                    details={"pattern": pattern, "reason": str(exc)},
                )
            )
    return Success(value=compiled)
