"""Operating system matcher backed by user-agents.

ua-parser's OS family is normalized to the names the resolution engine
reasons about ("Mac OS X" becomes "Mac", ARM builds of Windows 8 become
"Windows RT"). Windows versions come from the NT kernel token so they do
not depend on the ua-parser release installed.

The matcher owns the OS family table and the set of desktop families.

Architecture:
    - Infrastructure adapter implementing OsMatcherProtocol
    - Signature tables compiled in create() (Result type)
"""

import re

from uadetect.core.result import Failure, Result, Success
from uadetect.domain.errors import MatcherUnavailableError
from uadetect.domain.value_objects import OsInfo
from uadetect.infrastructure.matchers.pattern import compile_signatures
from uadetect.infrastructure.matchers.ua_source import (
    PLACEHOLDER_FAMILIES,
    clean,
    parse_user_agent,
)
from uadetect.infrastructure.matchers.version import truncate_version

OS_FAMILIES: dict[str, tuple[str, ...]] = {
    "Android": ("Android", "Fire OS"),
    "BlackBerry": ("BlackBerry OS", "BlackBerry Tablet OS"),
    "Chrome OS": ("Chrome OS",),
    "Firefox OS": ("Firefox OS", "KaiOS"),
    "GNU/Linux": (
        "GNU/Linux",
        "Arch Linux",
        "CentOS",
        "Debian",
        "Fedora",
        "Gentoo",
        "Kubuntu",
        "Linux Mint",
        "Mageia",
        "Mandriva",
        "Red Hat",
        "Slackware",
        "SUSE",
        "openSUSE",
        "Ubuntu",
    ),
    "iOS": ("iOS", "Apple TV", "watchOS", "iPadOS"),
    "Mac": ("Mac",),
    "Symbian": ("Symbian OS",),
    "Tizen": ("Tizen",),
    "Unix": ("AIX", "FreeBSD", "HP-UX", "IRIX", "NetBSD", "OpenBSD", "Solaris"),
    "webOS": ("webOS",),
    "Windows": ("Windows",),
    "Windows Mobile": ("Windows Phone", "Windows Mobile", "Windows CE", "Windows RT"),
}

DESKTOP_OS_FAMILIES: frozenset[str] = frozenset(
    {"AmigaOS", "IBM", "GNU/Linux", "Mac", "Unix", "Windows", "BeOS", "Chrome OS"}
)

# ua-parser family -> engine OS name.
OS_NAME_ALIASES: dict[str, str] = {
    "Mac OS X": "Mac",
    "Mac OS": "Mac",
    "macOS": "Mac",
    "ATV OS X": "Apple TV",
    "tvOS": "Apple TV",
    "Linux": "GNU/Linux",
    "Symbian^3": "Symbian OS",
    "Symbian^3 Anna": "Symbian OS",
    "Symbian^3 Belle": "Symbian OS",
    "Red Hat Enterprise Linux": "Red Hat",
    "Mint": "Linux Mint",
}

WINDOWS_NT_VERSIONS: dict[str, str] = {
    "5.0": "2000",
    "5.1": "XP",
    "5.2": "XP",
    "6.0": "Vista",
    "6.1": "7",
    "6.2": "8",
    "6.3": "8.1",
    "6.4": "10",
    "10.0": "10",
}

WINDOWS_NT_PATTERN = r"Windows NT (\d+\.\d+)"
WINDOWS_ARM_PATTERN = r"ARM;"

# (platform, pattern); x64 is checked before x86 since "x86_64" contains both.
PLATFORM_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("ARM", r"arm(?:64|v\d+l?|el)?(?=[ ;)_]|$)|aarch64"),
    ("x64", r"WOW64|Win64|x64|x86_64|amd64"),
    ("x86", r"i[3-6]86|x86"),
)


class UserAgentsOsMatcher:
    """OS matcher (implements OsMatcherProtocol).

    Usage:
        >>> match UserAgentsOsMatcher.create(version_truncation=1):
        ...     case Success(value=matcher):
        ...         matcher.match(user_agent)
    """

    def __init__(
        self,
        *,
        windows_nt: re.Pattern[str],
        windows_arm: re.Pattern[str],
        platforms: list[tuple[str, re.Pattern[str]]],
        version_truncation: int | None = 1,
    ) -> None:
        """Initialize with pre-compiled patterns.

        Use UserAgentsOsMatcher.create() instead of direct construction.
        """
        self._windows_nt = windows_nt
        self._windows_arm = windows_arm
        self._platforms = platforms
        self._version_truncation = version_truncation
        self._family_by_name = {
            name: family for family, names in OS_FAMILIES.items() for name in names
        }

    @classmethod
    def create(
        cls, *, version_truncation: int | None = 1
    ) -> Result["UserAgentsOsMatcher", MatcherUnavailableError]:
        """Build the matcher, compiling its patterns.

        Args:
            version_truncation: Precision of reported versions.

        Returns:
            Success(UserAgentsOsMatcher) or Failure(MatcherUnavailableError).
        """
        patterns = [WINDOWS_NT_PATTERN, WINDOWS_ARM_PATTERN]
        patterns.extend(pattern for _, pattern in PLATFORM_SIGNATURES)

        match compile_signatures(patterns, matcher_name="os"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=compiled):
                windows_nt, windows_arm, *platform_patterns = compiled
                return Success(
                    value=cls(
                        windows_nt=windows_nt,
                        windows_arm=windows_arm,
                        platforms=[
                            (platform, pattern)
                            for (platform, _), pattern in zip(
                                PLATFORM_SIGNATURES, platform_patterns
                            )
                        ],
                        version_truncation=version_truncation,
                    )
                )

    def match(self, user_agent: str) -> OsInfo | None:
        """Identify the operating system.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            OsInfo, or None when no OS is recognized.
        """
        if not user_agent:
            return None

        parsed = parse_user_agent(user_agent)
        family = clean(parsed.os.family)
        version = clean(parsed.os.version_string)

        if family.startswith("Windows"):
            name, version = self._windows(user_agent, family, version)
        elif family in PLACEHOLDER_FAMILIES:
            return None
        else:
            name = OS_NAME_ALIASES.get(family, family)

        return OsInfo(
            name=name,
            version=truncate_version(version, self._version_truncation),
            platform=self._platform(user_agent),
        )

    def family_of(self, os_name: str | None) -> str:
        """Map an OS name to its family ("" when unknown)."""
        if not os_name:
            return ""
        return self._family_by_name.get(os_name, "")

    def desktop_families(self) -> frozenset[str]:
        """Families that run on desktop hardware."""
        return DESKTOP_OS_FAMILIES

    def _windows(self, user_agent: str, family: str, version: str) -> tuple[str, str]:
        for mobile_name in ("Windows Phone", "Windows Mobile", "Windows CE"):
            if family.startswith(mobile_name):
                return mobile_name, version

        nt = self._windows_nt.search(user_agent)
        if nt:
            nt_version = nt.group(1)
            if nt_version in ("6.2", "6.3") and self._windows_arm.search(user_agent):
                return "Windows RT", WINDOWS_NT_VERSIONS[nt_version]
            return "Windows", WINDOWS_NT_VERSIONS.get(nt_version, version)

        if family.startswith("Windows RT"):
            return "Windows RT", version
        # Older ua-parser releases fold the version into the family ("Windows 7").
        suffix = family.removeprefix("Windows").strip()
        return "Windows", version or suffix

    def _platform(self, user_agent: str) -> str:
        for platform, pattern in self._platforms:
            if pattern.search(user_agent):
                return platform
        return ""
