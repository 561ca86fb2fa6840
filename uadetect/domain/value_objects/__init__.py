"""Domain value objects.

Usage:
    from uadetect.domain.value_objects import DetectionResult, DeviceInfo
"""

from uadetect.domain.value_objects.bot_info import BotInfo
from uadetect.domain.value_objects.client_info import ClientInfo
from uadetect.domain.value_objects.detection_result import DetectionResult
from uadetect.domain.value_objects.device_info import DeviceInfo
from uadetect.domain.value_objects.os_info import OsInfo

__all__ = [
    "BotInfo",
    "ClientInfo",
    "DetectionResult",
    "DeviceInfo",
    "OsInfo",
]
