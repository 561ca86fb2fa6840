"""Shared parse of a user agent through the user-agents library.

Every matcher adapter reads a different slice (browser, os, device) of the
same ua-parser record, so the parse is memoized per string.
"""

from functools import lru_cache

from user_agents import parse as parse_user_agent_string  # type: ignore[import-untyped]
from user_agents.parsers import UserAgent  # type: ignore[import-untyped]

# ua-parser placeholders that carry no information.
PLACEHOLDER_FAMILIES = frozenset({"", "Other"})


@lru_cache(maxsize=2048)
def parse_user_agent(user_agent: str) -> UserAgent:
    """Parse a user agent with user-agents / ua-parser.

    Args:
        user_agent: Raw user-agent string.

    Returns:
        UserAgent: Parsed record (browser, os, device families).
    """
    return parse_user_agent_string(user_agent)


def clean(value: str | None) -> str:
    """Normalize a ua-parser field to a stripped string ("" for None)."""
    return (value or "").strip()
