"""Unit tests for DetectorDeviceEnricher.

Tests cover:
- Mapping DetectionResult into DeviceEnrichmentResult
- Human-readable device_info
- Fail-open behavior on detector errors
- Empty user agent handling
"""

from unittest.mock import MagicMock

import pytest

from uadetect.domain.enums import ClientType, DeviceType
from uadetect.domain.protocols import DeviceEnrichmentResult
from uadetect.domain.value_objects import (
    BotInfo,
    ClientInfo,
    DetectionResult,
    DeviceInfo,
    OsInfo,
)
from uadetect.infrastructure.enrichers import DetectorDeviceEnricher


@pytest.fixture
def detector() -> MagicMock:
    return MagicMock()


@pytest.fixture
def enricher(detector, null_logger) -> DetectorDeviceEnricher:
    return DetectorDeviceEnricher(detector=detector, logger=null_logger)


@pytest.mark.unit
class TestDeviceEnricher:
    """Test enrich()."""

    @pytest.mark.asyncio
    async def test_full_result(self, enricher, detector):
        """Test every field is mapped."""
        detector.detect.return_value = DetectionResult(
            client=ClientInfo(name="Mobile Safari", type=ClientType.BROWSER, version="17.0"),
            os=OsInfo(name="iOS", version="17.1"),
            device=DeviceInfo(type=DeviceType.SMARTPHONE, brand="Apple", model="iPhone"),
        )

        result = await enricher.enrich("Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X)")

        assert result == DeviceEnrichmentResult(
            device_info="Mobile Safari on iOS",
            browser="Mobile Safari",
            browser_version="17.0",
            os="iOS",
            os_version="17.1",
            device_type="smartphone",
            device_brand="Apple",
            device_model="iPhone",
            is_bot=False,
        )

    @pytest.mark.asyncio
    async def test_unknown_fields_become_none(self, enricher, detector):
        """Test empty strings and unknown type are reported as None."""
        detector.detect.return_value = DetectionResult(
            os=OsInfo(name="Windows"),
            device=DeviceInfo(brand="Dell"),
        )

        result = await enricher.enrich("Mozilla/5.0 (Windows NT 6.1; MDDRJS)")

        assert result.device_info == "Unknown browser on Windows"
        assert result.browser is None
        assert result.os_version is None
        assert result.device_type is None
        assert result.device_brand == "Dell"
        assert result.device_model is None

    @pytest.mark.asyncio
    async def test_browser_only(self, enricher, detector):
        """Test device_info without an OS."""
        detector.detect.return_value = DetectionResult(
            client=ClientInfo(name="curl", type=ClientType.LIBRARY, version="8.4")
        )

        result = await enricher.enrich("curl/8.4.0")

        assert result.device_info == "curl"
        assert result.os is None

    @pytest.mark.asyncio
    async def test_bot(self, enricher, detector):
        """Test bots are flagged."""
        detector.detect.return_value = DetectionResult(bot=BotInfo(name="Googlebot"))

        result = await enricher.enrich("Googlebot/2.1")

        assert result.is_bot is True
        assert result.device_info is None

    @pytest.mark.asyncio
    async def test_empty_user_agent_skips_detection(self, enricher, detector):
        """Test empty input returns an empty result without detecting."""
        result = await enricher.enrich("")

        assert result == DeviceEnrichmentResult()
        detector.detect.assert_not_called()

    @pytest.mark.asyncio
    async def test_fail_open_on_detector_error(self, enricher, detector, null_logger):
        """Test unexpected detector errors return an empty result and log a warning."""
        detector.detect.side_effect = RuntimeError("boom")

        result = await enricher.enrich("Mozilla/5.0")

        assert result == DeviceEnrichmentResult()
        null_logger.warning.assert_called_once()
        assert null_logger.warning.call_args[1]["error"] == "boom"

    def test_enrichment_to_dict(self):
        """Test DeviceEnrichmentResult serialization."""
        data = DeviceEnrichmentResult(browser="Chrome", is_bot=False).to_dict()

        assert data["browser"] == "Chrome"
        assert data["device_type"] is None
        assert data["is_bot"] is False
