"""Matcher protocols (ports) used by the resolution engine.

Each matcher inspects a user-agent string on its own and returns a partial
classification, or None when nothing matched. Matchers hold no per-call
state and have no side effects, so the engine may call them in any order.

Architecture:
    - Domain layer protocols (ports)
    - Infrastructure adapters: uadetect/infrastructure/matchers/
    - Consumed by uadetect/application/services/device_detector.py

Behavior expected from every implementation:
    - Never raise for malformed or empty input; return None instead
    - Pure function of the user-agent string (and construction options)
"""

from typing import Protocol

from uadetect.domain.value_objects import BotInfo, ClientInfo, DeviceInfo, OsInfo


class ClientMatcherProtocol(Protocol):
    """Client (browser, app, library) matcher."""

    def match(self, user_agent: str) -> ClientInfo | None:
        """Identify the client software.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            ClientInfo, or None when no client signature matched.
        """
        ...

    def is_mobile_only_browser(self, name: str) -> bool:
        """Check if a browser ships exclusively on handheld platforms.

        Args:
            name: Browser name as reported in ClientInfo.name.

        Returns:
            bool: True for mobile-only browsers.
        """
        ...


class OsMatcherProtocol(Protocol):
    """Operating system matcher."""

    def match(self, user_agent: str) -> OsInfo | None:
        """Identify the operating system.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            OsInfo, or None when no OS signature matched.
        """
        ...

    def family_of(self, os_name: str | None) -> str:
        """Map an OS name to its family.

        Args:
            os_name: OS name as reported in OsInfo.name (None allowed).

        Returns:
            str: Family name, "" when the name is unknown.
        """
        ...

    def desktop_families(self) -> frozenset[str]:
        """Families that run on desktop hardware.

        Returns:
            frozenset[str]: Desktop OS family names.
        """
        ...


class DeviceMatcherProtocol(Protocol):
    """Device hardware matcher."""

    def match(self, user_agent: str) -> DeviceInfo | None:
        """Identify device type, brand and model.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            DeviceInfo, or None when nothing about the device is known.
        """
        ...


class BotMatcherProtocol(Protocol):
    """Bot matcher."""

    def match(self, user_agent: str) -> BotInfo | None:
        """Identify an automated client.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            BotInfo, or None when the client is not a known bot.
        """
        ...


class VendorFragmentMatcherProtocol(Protocol):
    """OEM vendor fragment matcher."""

    def match(self, user_agent: str) -> str | None:
        """Extract a device brand from an OEM user-agent fragment.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            Brand name, or None when no fragment matched.
        """
        ...
