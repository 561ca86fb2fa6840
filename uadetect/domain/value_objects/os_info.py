"""Operating system value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class OsInfo:
    """Operating system reported by the user agent.

    The OS family is not stored here; it is derived from ``name`` by the
    OS matcher's family table.

    Attributes:
        name: OS name ("Android", "iOS", "Mac", "Windows", "Windows RT").
        version: Version truncated to the configured precision ("" unknown).
        platform: CPU architecture ("x64", "x86", "ARM", "" unknown).
    """

    name: str
    version: str = ""
    platform: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values.

        Returns:
            dict[str, Any]: name, version and platform.
        """
        return {"name": self.name, "version": self.version, "platform": self.platform}
