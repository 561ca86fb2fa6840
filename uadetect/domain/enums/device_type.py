"""Device form factors.

Usage:
    from uadetect.domain.enums import DeviceType

    if result.device and result.device.type == DeviceType.TABLET:
        ...
"""

from enum import Enum


class DeviceType(str, Enum):
    """Device form factor.

    String Enum:
        Inherits from str so values compare equal to plain strings and
        serialize without conversion. UNKNOWN is the empty string.
    """

    UNKNOWN = ""
    SMARTPHONE = "smartphone"
    TABLET = "tablet"
    DESKTOP = "desktop"
    TELEVISION = "television"
    FEATURE_PHONE = "feature phone"

    @classmethod
    def values(cls) -> list[str]:
        """Get all device type values as strings.

        Returns:
            list[str]: List of device type values.
        """
        return [device_type.value for device_type in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid device type.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid device type.
        """
        return value in cls.values()
