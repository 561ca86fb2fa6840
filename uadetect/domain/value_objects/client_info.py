"""Client identity value object."""

from dataclasses import dataclass
from typing import Any

from uadetect.domain.enums import ClientType


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientInfo:
    """Software that sent the request (browser, app, library).

    Attributes:
        name: Client name ("Chrome", "Chrome Mobile", "curl").
        type: Client category.
        version: Version truncated to the configured precision ("" unknown).
    """

    name: str
    type: ClientType = ClientType.BROWSER
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values.

        Returns:
            dict[str, Any]: name, type and version.
        """
        return {"name": self.name, "type": self.type.value, "version": self.version}
