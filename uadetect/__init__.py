"""uadetect - user-agent classification.

Resolves a raw user-agent string into client, operating system, device and
bot identity.

Usage:
    from uadetect import get_device_detector

    result = get_device_detector().detect(user_agent)
    result.device.type  # DeviceType.SMARTPHONE
"""

from uadetect.application.services.device_detector import DeviceDetector
from uadetect.core.config import DetectorSettings, validate_detector_settings
from uadetect.core.container import get_device_detector
from uadetect.domain.enums import ClientType, DeviceType
from uadetect.domain.value_objects import (
    BotInfo,
    ClientInfo,
    DetectionResult,
    DeviceInfo,
    OsInfo,
)

__all__ = [
    "BotInfo",
    "ClientInfo",
    "ClientType",
    "DetectionResult",
    "DetectorSettings",
    "DeviceDetector",
    "DeviceInfo",
    "DeviceType",
    "OsInfo",
    "get_device_detector",
    "validate_detector_settings",
]
