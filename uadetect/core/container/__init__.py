"""Container module - Centralized dependency injection.

Usage:
    from uadetect.core.container import get_device_detector, get_logger

The container is organized into modules by concern:
- infrastructure: Ambient services (logging)
- detection: Device detector and enricher
"""

from uadetect.core.container.detection import get_device_detector, get_device_enricher
from uadetect.core.container.infrastructure import get_logger

__all__ = [
    "get_device_detector",
    "get_device_enricher",
    "get_logger",
]
