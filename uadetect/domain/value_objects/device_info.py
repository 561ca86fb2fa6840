"""Device hardware value object."""

from dataclasses import dataclass
from typing import Any

from uadetect.domain.enums import DeviceType


@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceInfo:
    """Device hardware description.

    Every field defaults to unknown. A DeviceInfo whose fields are all
    unknown is never surfaced in a detection result unless the device
    matcher itself produced it.

    Attributes:
        type: Form factor (UNKNOWN when undetermined).
        brand: Manufacturer name ("Apple", "Samsung", "" unknown).
        model: Model name ("iPhone", "SM-G930F", "" unknown).
    """

    type: DeviceType = DeviceType.UNKNOWN
    brand: str = ""
    model: str = ""

    @property
    def is_empty(self) -> bool:
        """Check if every field still holds its default.

        Returns:
            bool: True when type, brand and model are all unknown.
        """
        return self.type == DeviceType.UNKNOWN and not self.brand and not self.model

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values.

        Returns:
            dict[str, Any]: type, brand and model.
        """
        return {"type": self.type.value, "brand": self.brand, "model": self.model}
