"""Device matcher backed by user-agents.

Brand and model come from ua-parser's device record. The form factor comes
from an ordered signature table plus ua-parser's generic device families;
anything left undecided is resolved later by the engine's heuristics.

Architecture:
    - Infrastructure adapter implementing DeviceMatcherProtocol
    - Signature table compiled in create() (Result type)
"""

import re

from uadetect.core.result import Failure, Result, Success
from uadetect.domain.enums import DeviceType
from uadetect.domain.errors import MatcherUnavailableError
from uadetect.domain.value_objects import DeviceInfo
from uadetect.infrastructure.matchers.pattern import compile_signatures
from uadetect.infrastructure.matchers.ua_source import clean, parse_user_agent

# First match wins.
DEVICE_TYPE_SIGNATURES: tuple[tuple[str, DeviceType], ...] = (
    (
        r"SmartTV|SMART-TV|HbbTV|NetCast|BRAVIA|GoogleTV|Apple ?TV|AFT[A-Z]|CrKey|Roku"
        r"|Web0S.+TV|Tizen.+TV",
        DeviceType.TELEVISION,
    ),
    (r"iPad|Kindle|Silk|PlayBook", DeviceType.TABLET),
    (r"iPhone|iPod|Windows Phone|IEMobile|BlackBerry|BB10", DeviceType.SMARTPHONE),
    (
        r"Series ?[46]0|MAUI|J2ME|MIDP|UP\.Browser|Nokia[0-9]{3,4}|KaiOS|Obigo",
        DeviceType.FEATURE_PHONE,
    ),
)

GENERIC_DEVICE_TYPES: dict[str, DeviceType] = {
    "Generic Smartphone": DeviceType.SMARTPHONE,
    "Generic Tablet": DeviceType.TABLET,
    "Generic Feature Phone": DeviceType.FEATURE_PHONE,
}

# ua-parser brands that say nothing about the manufacturer.
PLACEHOLDER_BRANDS = frozenset(
    {"", "Generic", "Generic_Android", "Generic_Android_Tablet", "Generic_Inettv", "Spider"}
)


class UserAgentsDeviceMatcher:
    """Device matcher (implements DeviceMatcherProtocol).

    Usage:
        >>> match UserAgentsDeviceMatcher.create():
        ...     case Success(value=matcher):
        ...         matcher.match(user_agent)
    """

    def __init__(self, type_signatures: list[tuple[re.Pattern[str], DeviceType]]) -> None:
        """Initialize with a pre-compiled signature table.

        Use UserAgentsDeviceMatcher.create() instead of direct construction.
        """
        self._type_signatures = type_signatures

    @classmethod
    def create(cls) -> Result["UserAgentsDeviceMatcher", MatcherUnavailableError]:
        """Build the matcher, compiling its signature table.

        Returns:
            Success(UserAgentsDeviceMatcher) or Failure(MatcherUnavailableError).
        """
        match compile_signatures(
            (pattern for pattern, _ in DEVICE_TYPE_SIGNATURES), matcher_name="device"
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=compiled):
                return Success(
                    value=cls(
                        [
                            (pattern, device_type)
                            for pattern, (_, device_type) in zip(
                                compiled, DEVICE_TYPE_SIGNATURES
                            )
                        ]
                    )
                )

    def match(self, user_agent: str) -> DeviceInfo | None:
        """Identify device type, brand and model.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            DeviceInfo, or None when nothing about the device is known.
        """
        if not user_agent:
            return None

        device = parse_user_agent(user_agent).device
        family = clean(device.family)
        brand = clean(device.brand)
        model = ""
        if brand in PLACEHOLDER_BRANDS:
            brand = ""
        else:
            model = clean(device.model)

        info = DeviceInfo(
            type=self._device_type(user_agent, family),
            brand=brand,
            model=model,
        )
        return None if info.is_empty else info

    def _device_type(self, user_agent: str, family: str) -> DeviceType:
        for pattern, device_type in self._type_signatures:
            if pattern.search(user_agent):
                return device_type
        return GENERIC_DEVICE_TYPES.get(family, DeviceType.UNKNOWN)
