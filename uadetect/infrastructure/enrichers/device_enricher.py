"""Device enricher implementation on top of the device detector.

Turns a DetectionResult into the compact DeviceEnrichmentResult consumed by
session and audit code. Implements the DeviceEnricher protocol with
fail-open behavior.
"""

from uadetect.application.services.device_detector import DeviceDetector
from uadetect.domain.protocols import DeviceEnrichmentResult, LoggerProtocol
from uadetect.domain.value_objects import DetectionResult


class DetectorDeviceEnricher:
    """Device enricher using the resolution engine.

    Implements DeviceEnricher protocol (structural typing).

    Behavior:
        - Fail-open: Returns empty result on unexpected errors
        - Non-blocking: Pure string work (<1ms, usually a cache hit)
        - Best-effort: Unknown agents return partial data
    """

    def __init__(self, *, detector: DeviceDetector, logger: LoggerProtocol) -> None:
        self._detector = detector
        self._logger = logger

    async def enrich(self, user_agent: str) -> DeviceEnrichmentResult:
        """Parse user agent string to extract device information.

        Args:
            user_agent: Raw user agent string from HTTP header.

        Returns:
            DeviceEnrichmentResult with parsed device info.
            Returns empty result (all None) on parse failure.
        """
        if not user_agent:
            return DeviceEnrichmentResult()

        try:
            result = self._detector.detect(user_agent)
        except Exception as e:
            self._logger.warning(
                "Failed to parse user agent",
                user_agent=user_agent[:100],
                error=str(e),
            )
            return DeviceEnrichmentResult()

        return self._to_enrichment(result)

    def _to_enrichment(self, result: DetectionResult) -> DeviceEnrichmentResult:
        browser = result.client.name if result.client else None
        os_name = result.os.name if result.os else None
        device = result.device

        return DeviceEnrichmentResult(
            device_info=self._build_device_info(browser, os_name),
            browser=browser,
            browser_version=(result.client.version or None) if result.client else None,
            os=os_name,
            os_version=(result.os.version or None) if result.os else None,
            device_type=(device.type.value or None) if device else None,
            device_brand=(device.brand or None) if device else None,
            device_model=(device.model or None) if device else None,
            is_bot=result.bot is not None,
        )

    def _build_device_info(
        self,
        browser: str | None,
        os_name: str | None,
    ) -> str | None:
        """Build human-readable device info string.

        Returns:
            Human-readable string like "Chrome on Mac", or None.
        """
        if browser and os_name:
            return f"{browser} on {os_name}"
        if browser:
            return browser
        if os_name:
            return f"Unknown browser on {os_name}"
        return None
