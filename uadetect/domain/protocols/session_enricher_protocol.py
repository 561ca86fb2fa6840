"""Session enricher protocol for device enrichment.

Port through which request-handling code (session creation, audit trails,
analytics) asks for a compact device summary of a user agent.

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: uadetect/infrastructure/enrichers/device_enricher.py
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True, kw_only=True)
class DeviceEnrichmentResult:
    """Device details extracted from a user agent.

    Attributes:
        device_info: Human-readable summary ("Chrome on Mac").
        browser: Client name ("Chrome", "Mobile Safari").
        browser_version: Client version ("120.0").
        os: Operating system ("Mac", "Windows", "Android").
        os_version: OS version ("14.2", "10").
        device_type: Device form factor ("desktop", "smartphone", "tablet").
        device_brand: Manufacturer ("Apple", "Samsung").
        device_model: Model ("iPhone", "SM-G930F").
        is_bot: Whether the user agent belongs to a bot.
    """

    device_info: str | None = None
    browser: str | None = None
    browser_version: str | None = None
    os: str | None = None
    os_version: str | None = None
    device_type: str | None = None
    device_brand: str | None = None
    device_model: str | None = None
    is_bot: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logs and persistence."""
        return {
            "device_info": self.device_info,
            "browser": self.browser,
            "browser_version": self.browser_version,
            "os": self.os,
            "os_version": self.os_version,
            "device_type": self.device_type,
            "device_brand": self.device_brand,
            "device_model": self.device_model,
            "is_bot": self.is_bot,
        }


class DeviceEnricher(Protocol):
    """Device enricher protocol (port) for user agent parsing.

    Behavior:
        - Fail-open: Returns empty result on errors
        - Non-blocking: Pure string work, no I/O
        - Best-effort: Unknown agents return partial data

    Example:
        >>> class DetectorDeviceEnricher:
        ...     async def enrich(self, user_agent: str) -> DeviceEnrichmentResult:
        ...         ...
    """

    async def enrich(self, user_agent: str) -> DeviceEnrichmentResult:
        """Parse user agent string to extract device information.

        Args:
            user_agent: Raw user agent string from HTTP header.

        Returns:
            DeviceEnrichmentResult with parsed device info.
            Returns empty result (all None) on parse failure.
        """
        ...
