"""Domain enums.

Usage:
    from uadetect.domain.enums import ClientType, DeviceType
"""

from uadetect.domain.enums.client_type import ClientType
from uadetect.domain.enums.device_type import DeviceType

__all__ = ["ClientType", "DeviceType"]
