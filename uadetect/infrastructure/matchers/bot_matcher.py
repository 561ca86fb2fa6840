"""Bot matcher backed by user-agents.

ua-parser files crawlers under the "Spider" device family and usually
names them in the browser family ("Googlebot", "bingbot").
"""

from uadetect.domain.value_objects import BotInfo
from uadetect.infrastructure.matchers.ua_source import (
    PLACEHOLDER_FAMILIES,
    clean,
    parse_user_agent,
)

GENERIC_BOT_NAME = "Bot"


class UserAgentsBotMatcher:
    """Bot matcher (implements BotMatcherProtocol)."""

    def match(self, user_agent: str) -> BotInfo | None:
        """Identify an automated client.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            BotInfo, or None when the client is not a known bot.
        """
        if not user_agent:
            return None

        parsed = parse_user_agent(user_agent)
        if not parsed.is_bot:
            return None

        for family in (clean(parsed.browser.family), clean(parsed.device.family)):
            if family not in PLACEHOLDER_FAMILIES and family != "Spider":
                return BotInfo(name=family)
        return BotInfo(name=GENERIC_BOT_NAME)
