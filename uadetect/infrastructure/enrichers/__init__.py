"""Session metadata enrichers."""

from uadetect.infrastructure.enrichers.device_enricher import DetectorDeviceEnricher

__all__ = ["DetectorDeviceEnricher"]
