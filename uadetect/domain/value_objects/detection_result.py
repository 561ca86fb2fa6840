"""Detection result aggregate.

The value returned by DeviceDetector.detect(). Cached results are returned
as the same instance, so the record and its parts are immutable.

Usage:
    result = detector.detect(user_agent)
    logger.info("Request classified", **result.to_dict())
"""

from dataclasses import dataclass
from typing import Any

from uadetect.domain.value_objects.bot_info import BotInfo
from uadetect.domain.value_objects.client_info import ClientInfo
from uadetect.domain.value_objects.device_info import DeviceInfo
from uadetect.domain.value_objects.os_info import OsInfo


@dataclass(frozen=True, slots=True, kw_only=True)
class DetectionResult:
    """Structured description of the requesting client.

    Attributes:
        client: Client identity, None when no client signature matched.
        os: Operating system, None when no OS signature matched.
        device: Device hardware, None when nothing is known about it.
        bot: Bot identity, None when not a bot or bot detection is skipped.
    """

    client: ClientInfo | None = None
    os: OsInfo | None = None
    device: DeviceInfo | None = None
    bot: BotInfo | None = None

    @property
    def is_unknown(self) -> bool:
        """Check if nothing at all was detected.

        Returns:
            bool: True when all four parts are absent.
        """
        return (
            self.client is None
            and self.os is None
            and self.device is None
            and self.bot is None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to nested plain dicts for logs and API responses.

        Returns:
            dict[str, Any]: client, os, device and bot (None when absent).
        """
        return {
            "client": self.client.to_dict() if self.client else None,
            "os": self.os.to_dict() if self.os else None,
            "device": self.device.to_dict() if self.device else None,
            "bot": self.bot.to_dict() if self.bot else None,
        }
