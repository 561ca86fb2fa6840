"""Bot identity value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class BotInfo:
    """Automated client (crawler, monitor, scraper).

    Attributes:
        name: Bot name ("Googlebot", "bingbot").
    """

    name: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values."""
        return {"name": self.name}
