"""Infrastructure dependency factories.

Application-scoped singletons for ambient services:
- Logging (console, human-readable or JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import ValidationError

from uadetect.core.config import get_settings

if TYPE_CHECKING:
    from uadetect.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Invalid UADETECT_* values do not break logging: the adapter falls back to
    its defaults and DeviceDetector.create() reports the problem.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from uadetect.infrastructure.logging.console_adapter import ConsoleAdapter

    try:
        settings = get_settings()
    except ValidationError:
        return ConsoleAdapter()

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", log_level=settings.log_level)
