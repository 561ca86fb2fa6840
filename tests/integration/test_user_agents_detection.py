"""Integration tests: DeviceDetector with the bundled user-agents matchers.

Tests cover:
- Real user agents end to end (ua-parser + signature tables + heuristics)
- Version truncation settings
- Bot detection switch

Architecture:
- Uses the real user-agents / ua-parser stack (no mocks except the logger)
- Assertions stick to fields stable across ua-parser regex releases
"""

import pytest

from uadetect.application.services.device_detector import DeviceDetector
from uadetect.core.config import DetectorSettings
from uadetect.core.result import Success
from uadetect.domain.enums import ClientType, DeviceType

CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.6099.109 Safari/537.36"
)
SAFARI_IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)
SAFARI_IPAD_UA = (
    "Mozilla/5.0 (iPad; CPU OS 12_2 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/12.1 Mobile/15E148 Safari/604.1"
)
SAFARI_MAC_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
)
CHROME_ANDROID_PHONE_UA = (
    "Mozilla/5.0 (Linux; Android 4.4.2; Nexus 5 Build/KOT49H) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/34.0.1847.114 Mobile Safari/537.36"
)
CHROME_ANDROID_TABLET_UA = (
    "Mozilla/5.0 (Linux; Android 4.4.2; Nexus 7 Build/KOT49H) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/34.0.1847.114 Safari/537.36"
)
IE_WINDOWS_RT_UA = (
    "Mozilla/5.0 (compatible; MSIE 10.0; Windows NT 6.2; ARM; Trident/6.0; Touch)"
)
IE_DELL_UA = "Mozilla/5.0 (Windows NT 6.3; WOW64; Trident/7.0; MDDRJS; rv:11.0) like Gecko"
OPERA_TV_STORE_UA = (
    "Opera/9.80 (Linux mips; Opera TV Store/5581; U; en) Presto/2.12.362 Version/12.11"
)
GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


@pytest.fixture
def build_detector(null_logger):
    """Build a real detector with explicit settings."""

    def _build(**values) -> DeviceDetector:
        result = DeviceDetector.create(DetectorSettings(**values), logger=null_logger)
        assert isinstance(result, Success)
        return result.value

    return _build


@pytest.fixture
def detector(build_detector) -> DeviceDetector:
    return build_detector()


@pytest.mark.integration
class TestDesktopUserAgents:
    """Test desktop browsers."""

    def test_chrome_on_windows(self, detector):
        """Test Chrome on Windows 10 is a desktop."""
        result = detector.detect(CHROME_WINDOWS_UA)

        assert result.client.name == "Chrome"
        assert result.client.type == ClientType.BROWSER
        assert result.client.version == "120.0"
        assert result.os.name == "Windows"
        assert result.os.version == "10"
        assert result.os.platform == "x64"
        assert result.device.type == DeviceType.DESKTOP
        assert result.bot is None

    def test_safari_on_mac(self, detector):
        """Test a Mac is an Apple desktop."""
        result = detector.detect(SAFARI_MAC_UA)

        assert result.os.name == "Mac"
        assert result.device.type == DeviceType.DESKTOP
        assert result.device.brand == "Apple"

    def test_oem_fragment_brand(self, detector):
        """Test the Dell fragment brands an IE11 desktop."""
        result = detector.detect(IE_DELL_UA)

        assert result.os.name == "Windows"
        assert result.os.version == "8.1"
        assert result.device.brand == "Dell"
        assert result.device.type == DeviceType.DESKTOP


@pytest.mark.integration
class TestHandheldUserAgents:
    """Test phones and tablets."""

    def test_iphone(self, detector):
        """Test an iPhone is an Apple smartphone."""
        result = detector.detect(SAFARI_IPHONE_UA)

        assert result.client.name == "Mobile Safari"
        assert result.os.name == "iOS"
        assert result.os.version == "17.1"
        assert result.device.type == DeviceType.SMARTPHONE
        assert result.device.brand == "Apple"

    def test_ipad(self, detector):
        """Test an iPad is an Apple tablet."""
        result = detector.detect(SAFARI_IPAD_UA)

        assert result.os.name == "iOS"
        assert result.device.type == DeviceType.TABLET
        assert result.device.brand == "Apple"

    def test_chrome_android_phone(self, detector):
        """Test Chrome with the Mobile token on Android is a smartphone."""
        result = detector.detect(CHROME_ANDROID_PHONE_UA)

        assert result.os.name == "Android"
        assert result.os.version == "4.4"
        assert result.device.type == DeviceType.SMARTPHONE

    def test_chrome_android_tablet(self, detector):
        """Test Chrome without the Mobile token on Android is a tablet."""
        result = detector.detect(CHROME_ANDROID_TABLET_UA)

        assert result.os.name == "Android"
        assert result.device.type == DeviceType.TABLET

    def test_windows_rt_touch(self, detector):
        """Test IE10 on Windows RT with Touch is a tablet."""
        result = detector.detect(IE_WINDOWS_RT_UA)

        assert result.os.name == "Windows RT"
        assert result.os.platform == "ARM"
        assert result.device.type == DeviceType.TABLET


@pytest.mark.integration
class TestOtherUserAgents:
    """Test televisions, bots and unknown input."""

    def test_opera_tv_store(self, detector):
        """Test Opera TV Store is a television."""
        result = detector.detect(OPERA_TV_STORE_UA)

        assert result.device.type == DeviceType.TELEVISION

    def test_googlebot(self, detector):
        """Test Googlebot is reported as a bot and not as a client."""
        result = detector.detect(GOOGLEBOT_UA)

        assert result.bot is not None
        assert result.bot.name == "Googlebot"
        assert result.client is None
        assert detector.is_bot(GOOGLEBOT_UA) is True

    def test_googlebot_with_bot_detection_skipped(self, build_detector):
        """Test skip_bot_detection hides bots."""
        detector = build_detector(skip_bot_detection=True)

        assert detector.detect(GOOGLEBOT_UA).bot is None

    @pytest.mark.parametrize("user_agent", ["", None])
    def test_empty_input(self, detector, user_agent):
        """Test empty input yields an all-None result."""
        assert detector.detect(user_agent).is_unknown is True


@pytest.mark.integration
class TestVersionTruncation:
    """Test version_truncation setting."""

    def test_major_only(self, build_detector):
        """Test level 0 keeps the major version."""
        detector = build_detector(version_truncation=0)

        result = detector.detect(CHROME_WINDOWS_UA)

        assert result.client.version == "120"

    def test_patch_level(self, build_detector):
        """Test level 2 keeps major.minor.patch."""
        detector = build_detector(version_truncation=2)

        result = detector.detect(CHROME_WINDOWS_UA)

        assert result.client.version == "120.0.6099"

    def test_caching_is_transparent(self, build_detector):
        """Test cached and uncached detectors agree."""
        cached = build_detector(cache=True)
        uncached = build_detector(cache=False)

        for user_agent in (CHROME_WINDOWS_UA, SAFARI_IPHONE_UA, OPERA_TV_STORE_UA):
            assert cached.detect(user_agent) == uncached.detect(user_agent)
            assert cached.detect(user_agent) == uncached.detect(user_agent)
