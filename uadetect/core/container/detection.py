"""Device detection dependency factories.

Application-scoped singletons:
- DeviceDetector built from environment settings
- DetectorDeviceEnricher wrapping that detector

Construction failures (bad settings, broken signature tables) arrive as
Result failures and are turned into RuntimeError here, at the composition
root.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from uadetect.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from uadetect.application.services.device_detector import DeviceDetector
    from uadetect.domain.protocols.session_enricher_protocol import DeviceEnricher


@lru_cache()
def get_device_detector() -> "DeviceDetector":
    """Get device detector singleton (app-scoped).

    Returns:
        DeviceDetector configured from ``UADETECT_*`` environment variables.

    Raises:
        RuntimeError: If settings are invalid or a matcher cannot be built.

    Usage:
        detector = get_device_detector()
        result = detector.detect(user_agent)
    """
    from uadetect.application.services.device_detector import DeviceDetector
    from uadetect.core.result import Failure, Success

    logger = get_logger()
    match DeviceDetector.create(logger=logger):
        case Success(value=detector):
            return detector
        case Failure(error=err):
            logger.error("Device detector construction failed", reason=str(err))
            raise RuntimeError(f"Failed to initialize device detector: {err.message}")


@lru_cache()
def get_device_enricher() -> "DeviceEnricher":
    """Get device enricher singleton (app-scoped).

    Returns:
        DetectorDeviceEnricher backed by get_device_detector().
    """
    from uadetect.infrastructure.enrichers.device_enricher import DetectorDeviceEnricher

    return DetectorDeviceEnricher(detector=get_device_detector(), logger=get_logger())
