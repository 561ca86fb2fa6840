"""Result cache adapters."""

from uadetect.infrastructure.cache.detection_cache import DetectionCache

__all__ = ["DetectionCache"]
