"""Client matcher backed by user-agents.

Identifies the browser, app or library that sent the request. A short
signature table catches TV browsers ua-parser does not know; everything
else comes from ua-parser's browser family.

Architecture:
    - Infrastructure adapter implementing ClientMatcherProtocol
    - Signature table compiled in create() (Result type)
"""

import re

from uadetect.core.result import Failure, Result, Success
from uadetect.domain.enums import ClientType
from uadetect.domain.errors import MatcherUnavailableError
from uadetect.domain.value_objects import ClientInfo
from uadetect.infrastructure.matchers.pattern import compile_signatures
from uadetect.infrastructure.matchers.ua_source import (
    PLACEHOLDER_FAMILIES,
    clean,
    parse_user_agent,
)
from uadetect.infrastructure.matchers.version import truncate_version

# (name, pattern, type). Group 1 captures the version when present.
CLIENT_SIGNATURES: tuple[tuple[str, str, ClientType], ...] = (
    ("Kylo", r"Kylo(?:/(\d+[\.\d]+))?", ClientType.BROWSER),
    ("Espial TV Browser", r"Espial(?:/sig)?(?:/(\d+[\.\d]+))?", ClientType.BROWSER),
)

CLIENT_TYPES: dict[str, ClientType] = {
    # Libraries
    "curl": ClientType.LIBRARY,
    "Wget": ClientType.LIBRARY,
    "Python Requests": ClientType.LIBRARY,
    "Python-urllib": ClientType.LIBRARY,
    "okhttp": ClientType.LIBRARY,
    "Apache-HttpClient": ClientType.LIBRARY,
    "Java": ClientType.LIBRARY,
    "Go-http-client": ClientType.LIBRARY,
    # In-app browsers
    "Facebook": ClientType.MOBILE_APP,
    "Instagram": ClientType.MOBILE_APP,
    "Pinterest": ClientType.MOBILE_APP,
    "Twitter": ClientType.MOBILE_APP,
    "LinkedIn": ClientType.MOBILE_APP,
    "WeChat": ClientType.MOBILE_APP,
    "Snapchat": ClientType.MOBILE_APP,
    # Feed readers, players, mail
    "Feedly": ClientType.FEED_READER,
    "NewsBlur": ClientType.FEED_READER,
    "VLC": ClientType.MEDIA_PLAYER,
    "iTunes": ClientType.MEDIA_PLAYER,
    "Thunderbird": ClientType.PIM,
    "Outlook": ClientType.PIM,
    "Apple Mail": ClientType.PIM,
}

MOBILE_ONLY_BROWSERS: frozenset[str] = frozenset(
    {
        "Android",
        "BlackBerry WebKit",
        "Chrome Mobile iOS",
        "Edge Mobile",
        "Firefox iOS",
        "Firefox Mobile",
        "Huawei Browser",
        "IE Mobile",
        "MIUI Browser",
        "Mobile Safari",
        "Mobile Safari UI/WKWebView",
        "Nokia Browser",
        "Nokia Services (WAP) Browser",
        "Opera Mini",
        "Opera Mobile",
        "Opera Touch",
        "Samsung Internet",
        "Silk",
        "UC Browser",
    }
)


class UserAgentsClientMatcher:
    """Client matcher (implements ClientMatcherProtocol).

    Bots are left to the bot matcher: when ua-parser classifies the agent
    as a spider, no client is reported.

    Usage:
        >>> match UserAgentsClientMatcher.create(version_truncation=1):
        ...     case Success(value=matcher):
        ...         matcher.match(user_agent)
    """

    def __init__(
        self,
        signatures: list[tuple[str, re.Pattern[str], ClientType]],
        *,
        version_truncation: int | None = 1,
    ) -> None:
        """Initialize with a pre-compiled signature table.

        Use UserAgentsClientMatcher.create() instead of direct construction.
        """
        self._signatures = signatures
        self._version_truncation = version_truncation

    @classmethod
    def create(
        cls, *, version_truncation: int | None = 1
    ) -> Result["UserAgentsClientMatcher", MatcherUnavailableError]:
        """Build the matcher, compiling its signature table.

        Args:
            version_truncation: Precision of reported versions.

        Returns:
            Success(UserAgentsClientMatcher) or Failure(MatcherUnavailableError).
        """
        compiled = compile_signatures(
            (pattern for _, pattern, _ in CLIENT_SIGNATURES), matcher_name="client"
        )
        match compiled:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=patterns):
                signatures = [
                    (name, pattern, client_type)
                    for (name, _, client_type), pattern in zip(CLIENT_SIGNATURES, patterns)
                ]
                return Success(
                    value=cls(signatures, version_truncation=version_truncation)
                )

    def match(self, user_agent: str) -> ClientInfo | None:
        """Identify the client software.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            ClientInfo, or None when no client is recognized.
        """
        if not user_agent:
            return None

        for name, pattern, client_type in self._signatures:
            found = pattern.search(user_agent)
            if found:
                return ClientInfo(
                    name=name,
                    type=client_type,
                    version=truncate_version(found.group(1) or "", self._version_truncation),
                )

        parsed = parse_user_agent(user_agent)
        if parsed.is_bot:
            return None

        family = clean(parsed.browser.family)
        if family in PLACEHOLDER_FAMILIES:
            return None

        return ClientInfo(
            name=family,
            type=CLIENT_TYPES.get(family, ClientType.BROWSER),
            version=truncate_version(
                clean(parsed.browser.version_string), self._version_truncation
            ),
        )

    def is_mobile_only_browser(self, name: str) -> bool:
        """Check if a browser ships exclusively on handheld platforms."""
        return name in MOBILE_ONLY_BROWSERS
