"""Shared pytest fixtures.

Provides:
1. Test settings built explicitly (no environment leakage)
2. A null logger that records nothing
3. Configurable fake matchers so engine tests control every signal
4. A detector factory wiring fakes into DeviceDetector
"""

from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from uadetect.application.services.device_detector import DeviceDetector
from uadetect.core.config import DetectorSettings
from uadetect.domain.protocols import LoggerProtocol
from uadetect.domain.value_objects import BotInfo, ClientInfo, DeviceInfo, OsInfo
from uadetect.infrastructure.cache import DetectionCache
from uadetect.infrastructure.matchers.os_matcher import DESKTOP_OS_FAMILIES, OS_FAMILIES
from uadetect.infrastructure.matchers.client_matcher import MOBILE_ONLY_BROWSERS

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@dataclass
class FakeMatchers:
    """Matcher doubles returning whatever the test assigns.

    Each fake records the user agents it was asked about in ``calls`` so
    tests can assert how often the matchers actually ran.
    """

    client: ClientInfo | None = None
    os: OsInfo | None = None
    device: DeviceInfo | None = None
    bot: BotInfo | None = None
    vendor_brand: str | None = None
    calls: dict[str, list[str]] = field(
        default_factory=lambda: {
            "client": [],
            "os": [],
            "device": [],
            "bot": [],
            "vendor_fragment": [],
        }
    )

    def client_matcher(self) -> MagicMock:
        matcher = MagicMock()
        matcher.match.side_effect = lambda ua: self._record("client", ua, self.client)
        matcher.is_mobile_only_browser.side_effect = lambda name: name in MOBILE_ONLY_BROWSERS
        return matcher

    def os_matcher(self) -> MagicMock:
        family_by_name = {
            name: family for family, names in OS_FAMILIES.items() for name in names
        }
        matcher = MagicMock()
        matcher.match.side_effect = lambda ua: self._record("os", ua, self.os)
        matcher.family_of.side_effect = lambda name: family_by_name.get(name or "", "")
        matcher.desktop_families.return_value = DESKTOP_OS_FAMILIES
        return matcher

    def device_matcher(self) -> MagicMock:
        matcher = MagicMock()
        matcher.match.side_effect = lambda ua: self._record("device", ua, self.device)
        return matcher

    def bot_matcher(self) -> MagicMock:
        matcher = MagicMock()
        matcher.match.side_effect = lambda ua: self._record("bot", ua, self.bot)
        return matcher

    def vendor_fragment_matcher(self) -> MagicMock:
        matcher = MagicMock()
        matcher.match.side_effect = lambda ua: self._record(
            "vendor_fragment", ua, self.vendor_brand
        )
        return matcher

    def _record(self, name, user_agent, value):
        self.calls[name].append(user_agent)
        return value


@pytest.fixture
def test_settings() -> DetectorSettings:
    """Default settings, independent of UADETECT_* environment variables."""
    return DetectorSettings(
        environment="testing",
        log_level="INFO",
        skip_bot_detection=False,
        version_truncation=1,
        cache=True,
        cache_max_entries=5000,
    )


@pytest.fixture
def null_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    logger = MagicMock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def fakes() -> FakeMatchers:
    """Fresh matcher doubles (every matcher answers None by default)."""
    return FakeMatchers()


@pytest.fixture
def make_detector(fakes, test_settings, null_logger):
    """Factory building a DeviceDetector around the fake matchers.

    Usage:
        detector = make_detector()
        detector = make_detector(skip_bot_detection=True, cache=False)
    """

    def _make(**overrides) -> DeviceDetector:
        settings = test_settings.model_copy(update=overrides)
        cache = (
            DetectionCache(
                max_entries=settings.cache_max_entries,
                ttl_seconds=settings.cache_ttl,
            )
            if settings.cache_enabled
            else None
        )
        return DeviceDetector(
            settings=settings,
            client_matcher=fakes.client_matcher(),
            os_matcher=fakes.os_matcher(),
            device_matcher=fakes.device_matcher(),
            bot_matcher=fakes.bot_matcher(),
            vendor_fragment_matcher=fakes.vendor_fragment_matcher(),
            cache=cache,
            logger=null_logger,
        )

    return _make
