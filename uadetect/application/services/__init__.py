"""Application services."""

from uadetect.application.services.device_detector import DeviceDetector

__all__ = ["DeviceDetector"]
