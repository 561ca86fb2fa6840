"""Matcher adapters and the primitives they share.

Usage:
    from uadetect.infrastructure.matchers import user_agent_matches, version_compare
"""

from uadetect.infrastructure.matchers.bot_matcher import UserAgentsBotMatcher
from uadetect.infrastructure.matchers.client_matcher import UserAgentsClientMatcher
from uadetect.infrastructure.matchers.device_matcher import UserAgentsDeviceMatcher
from uadetect.infrastructure.matchers.os_matcher import UserAgentsOsMatcher
from uadetect.infrastructure.matchers.pattern import user_agent_matches
from uadetect.infrastructure.matchers.vendor_fragment_matcher import (
    SignatureVendorFragmentMatcher,
)
from uadetect.infrastructure.matchers.version import truncate_version, version_compare

__all__ = [
    "SignatureVendorFragmentMatcher",
    "UserAgentsBotMatcher",
    "UserAgentsClientMatcher",
    "UserAgentsDeviceMatcher",
    "UserAgentsOsMatcher",
    "truncate_version",
    "user_agent_matches",
    "version_compare",
]
