"""Device detection resolution engine.

Runs the client, OS, device and bot matchers over a user agent, merges
their partial answers, then walks a fixed chain of heuristics that fill in
the device type and brand the matchers left open. Finished results are
memoized per user-agent string.

Heuristic order matters: most rules only fire while the device type (or
brand) is still unknown, so an earlier rule pre-empts a later one. Three
rules deliberately ignore that guard and overwrite:
    - "Opera Tablet" always means tablet (the Android tablet fragment half
      of the same rule is guarded, this half is not)
    - a feature phone running Android is corrected to smartphone
    - "Opera TV Store" always means television

Architecture:
    - Application service; depends only on domain protocols
    - Built through DeviceDetector.create() (Result type) or the container
    - Owns its cache: detectors with different settings never share results

Usage:
    from uadetect.application.services.device_detector import DeviceDetector

    match DeviceDetector.create(settings):
        case Success(value=detector):
            result = detector.detect(request.headers["user-agent"])
        case Failure(error=error):
            ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from uadetect.core.config import DetectorSettings, validate_detector_settings
from uadetect.core.result import Failure, Result, Success
from uadetect.domain.enums import ClientType, DeviceType
from uadetect.domain.errors import DetectorError
from uadetect.domain.protocols import (
    BotMatcherProtocol,
    ClientMatcherProtocol,
    DetectionCacheProtocol,
    DeviceMatcherProtocol,
    LoggerProtocol,
    OsMatcherProtocol,
    VendorFragmentMatcherProtocol,
)
from uadetect.domain.value_objects import (
    ClientInfo,
    DetectionResult,
    DeviceInfo,
    OsInfo,
)
from uadetect.infrastructure.matchers.pattern import user_agent_matches
from uadetect.infrastructure.matchers.version import version_compare

APPLE_OS_NAMES = frozenset({"Apple TV", "iOS", "Mac"})
ANDROID_CHROME_CLIENTS = frozenset({"Chrome", "Chrome Mobile"})
TV_BROWSER_CLIENTS = frozenset({"Kylo", "Espial TV Browser"})

CHROME_MOBILE_PATTERN = r"Chrome/[\.0-9]* Mobile"
CHROME_NOT_MOBILE_PATTERN = r"Chrome/[\.0-9]* (?!Mobile)"
ANDROID_TABLET_PATTERN = r"Android( [\.0-9]+)?; Tablet;"
ANDROID_MOBILE_PATTERN = r"Android( [\.0-9]+)?; Mobile;"
OPERA_TABLET_PATTERN = r"Opera Tablet"
OPERA_TV_STORE_PATTERN = r"Opera TV Store"
TOUCH_PATTERN = r"Touch"

LOG_USER_AGENT_LIMIT = 100


@dataclass(slots=True)
class _DeviceDraft:
    """Mutable device record used while the heuristics run.

    Surfaced as a DeviceInfo only if the device matcher produced one or a
    heuristic changed a field away from its default.
    """

    type: DeviceType = DeviceType.UNKNOWN
    brand: str = ""
    model: str = ""
    matched: bool = False

    @classmethod
    def from_device(cls, device: DeviceInfo | None) -> _DeviceDraft:
        if device is None:
            return cls()
        return cls(type=device.type, brand=device.brand, model=device.model, matched=True)

    @property
    def has_type(self) -> bool:
        return self.type != DeviceType.UNKNOWN

    def freeze(self) -> DeviceInfo | None:
        info = DeviceInfo(type=self.type, brand=self.brand, model=self.model)
        if not self.matched and info.is_empty:
            return None
        return info


@dataclass(frozen=True, slots=True, kw_only=True)
class _Signals:
    """Matcher output the heuristics read, with typed defaults."""

    client: ClientInfo | None
    os: OsInfo | None
    os_family: str

    @property
    def client_name(self) -> str:
        return self.client.name if self.client else ""

    @property
    def os_name(self) -> str:
        return self.os.name if self.os else ""

    @property
    def os_version(self) -> str:
        return self.os.version if self.os else ""


type _Rule = Callable[[str, _DeviceDraft, _Signals], None]


class DeviceDetector:
    """Resolution engine: matchers, merge, heuristics, cache.

    Thread Safety:
        detect() may be called from several threads. The only shared state
        is the cache, which locks internally; two threads missing on the
        same user agent both compute the (identical) result.

    Attributes:
        settings: Settings the detector was built with.
    """

    def __init__(
        self,
        *,
        settings: DetectorSettings,
        client_matcher: ClientMatcherProtocol,
        os_matcher: OsMatcherProtocol,
        device_matcher: DeviceMatcherProtocol,
        bot_matcher: BotMatcherProtocol,
        vendor_fragment_matcher: VendorFragmentMatcherProtocol,
        cache: DetectionCacheProtocol | None,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize with ready collaborators.

        Use DeviceDetector.create() unless the matchers are substituted
        (tests, custom signature sources).

        Args:
            settings: Validated detector settings.
            client_matcher: Client matcher.
            os_matcher: OS matcher (also owns the OS family tables).
            device_matcher: Device matcher.
            bot_matcher: Bot matcher (skipped when settings say so).
            vendor_fragment_matcher: OEM fragment matcher.
            cache: Result cache, None to disable caching.
            logger: Structured logger.
        """
        self._settings = settings
        self._client_matcher = client_matcher
        self._os_matcher = os_matcher
        self._device_matcher = device_matcher
        self._bot_matcher = bot_matcher
        self._vendor_fragment_matcher = vendor_fragment_matcher
        self._cache = cache
        self._logger = logger

        # Fixed order; see module docstring.
        self._rules: tuple[_Rule, ...] = (
            self._brand_from_vendor_fragment,
            self._brand_from_apple_os,
            self._type_from_android_chrome,
            self._type_from_tablet_fragment,
            self._type_from_mobile_fragment,
            self._type_from_android_version,
            self._correct_android_feature_phone,
            self._type_from_windows_touch,
            self._type_from_opera_tv_store,
            self._type_from_tv_browser,
            self._type_from_desktop_os,
        )

    @classmethod
    def create(
        cls,
        settings: DetectorSettings | None = None,
        *,
        logger: LoggerProtocol | None = None,
    ) -> Result[DeviceDetector, DetectorError]:
        """Build a detector with the bundled matcher adapters.

        Settings are validated and every signature table is compiled here,
        so configuration and table problems surface once, at construction.

        Args:
            settings: Detector settings; loaded from the environment when None.
            logger: Structured logger; the container logger when None.

        Returns:
            Success(DeviceDetector), or Failure(ConfigurationError |
            MatcherUnavailableError).
        """
        from uadetect.infrastructure.cache.detection_cache import DetectionCache
        from uadetect.infrastructure.matchers import (
            SignatureVendorFragmentMatcher,
            UserAgentsBotMatcher,
            UserAgentsClientMatcher,
            UserAgentsDeviceMatcher,
            UserAgentsOsMatcher,
        )

        if settings is None:
            match validate_detector_settings():
                case Failure(error=config_error):
                    return Failure(error=config_error)
                case Success(value=loaded):
                    settings = loaded

        if logger is None:
            from uadetect.core.container import get_logger

            logger = get_logger()

        truncation = settings.version_truncation
        client_result = UserAgentsClientMatcher.create(version_truncation=truncation)
        if isinstance(client_result, Failure):
            return Failure(error=client_result.error)
        os_result = UserAgentsOsMatcher.create(version_truncation=truncation)
        if isinstance(os_result, Failure):
            return Failure(error=os_result.error)
        device_result = UserAgentsDeviceMatcher.create()
        if isinstance(device_result, Failure):
            return Failure(error=device_result.error)
        vendor_result = SignatureVendorFragmentMatcher.create()
        if isinstance(vendor_result, Failure):
            return Failure(error=vendor_result.error)

        cache = None
        if settings.cache_enabled:
            cache = DetectionCache(
                max_entries=settings.cache_max_entries,
                ttl_seconds=settings.cache_ttl,
            )

        detector = cls(
            settings=settings,
            client_matcher=client_result.value,
            os_matcher=os_result.value,
            device_matcher=device_result.value,
            bot_matcher=UserAgentsBotMatcher(),
            vendor_fragment_matcher=vendor_result.value,
            cache=cache,
            logger=logger.bind(component="device_detector"),
        )
        detector._logger.info(
            "Device detector ready",
            cache_enabled=cache is not None,
            cache_ttl_seconds=settings.cache_ttl,
            cache_max_entries=settings.cache_max_entries,
            skip_bot_detection=settings.skip_bot_detection,
            version_truncation=truncation,
        )
        return Success(value=detector)

    @property
    def settings(self) -> DetectorSettings:
        return self._settings

    def detect(self, user_agent: str | None) -> DetectionResult:
        """Classify a user agent.

        Never raises for odd input: an empty or unrecognized user agent
        yields a result whose four parts are all None.

        Args:
            user_agent: Raw user-agent string (None is treated as "").

        Returns:
            DetectionResult: Cached instance on a cache hit, a fresh one
            otherwise.
        """
        user_agent = user_agent or ""

        if self._cache is not None:
            cached = self._cache.get(user_agent)
            if cached is not None:
                self._logger.debug(
                    "Detection cache hit",
                    user_agent=user_agent[:LOG_USER_AGENT_LIMIT],
                )
                return cached

        result = self._resolve(user_agent)

        if self._cache is not None:
            self._cache.set(user_agent, result)

        self._logger.debug(
            "User agent classified",
            user_agent=user_agent[:LOG_USER_AGENT_LIMIT],
            device_type=result.device.type.value if result.device else None,
            os=result.os.name if result.os else None,
            client=result.client.name if result.client else None,
            bot=result.bot is not None,
        )
        return result

    def detect_many(self, user_agents: Iterable[str | None]) -> list[DetectionResult]:
        """Classify several user agents, preserving input order."""
        return [self.detect(user_agent) for user_agent in user_agents]

    def is_bot(self, user_agent: str | None) -> bool:
        """Check if a user agent belongs to a bot.

        Always False when bot detection is skipped.
        """
        return self.detect(user_agent).bot is not None

    def clear_cache(self) -> None:
        """Drop every cached result (no-op when caching is disabled)."""
        if self._cache is not None:
            self._cache.clear()

    # -- Resolution ------------------------------------------------------

    def _resolve(self, user_agent: str) -> DetectionResult:
        client = self._client_matcher.match(user_agent)
        os_info = self._os_matcher.match(user_agent)
        device = self._device_matcher.match(user_agent)
        bot = (
            None
            if self._settings.skip_bot_detection
            else self._bot_matcher.match(user_agent)
        )

        signals = _Signals(
            client=client,
            os=os_info,
            os_family=self._os_matcher.family_of(os_info.name if os_info else None),
        )
        draft = _DeviceDraft.from_device(device)
        for rule in self._rules:
            rule(user_agent, draft, signals)

        return DetectionResult(client=client, os=os_info, device=draft.freeze(), bot=bot)

    # -- Heuristics (called in the order listed in __init__) -------------

    def _brand_from_vendor_fragment(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if draft.brand:
            return
        brand = self._vendor_fragment_matcher.match(user_agent)
        if brand:
            draft.brand = brand

    def _brand_from_apple_os(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        # Every device running iOS, tvOS or macOS is made by Apple.
        if not draft.brand and signals.os_name in APPLE_OS_NAMES:
            draft.brand = "Apple"

    def _type_from_android_chrome(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        # Chrome for Android adds "Mobile" on phones and omits it on tablets.
        if (
            draft.has_type
            or signals.os_family != "Android"
            or signals.client_name not in ANDROID_CHROME_CLIENTS
        ):
            return
        if user_agent_matches(CHROME_MOBILE_PATTERN, user_agent):
            draft.type = DeviceType.SMARTPHONE
        elif user_agent_matches(CHROME_NOT_MOBILE_PATTERN, user_agent):
            draft.type = DeviceType.TABLET

    def _type_from_tablet_fragment(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        # "Opera Tablet" overrides an earlier type; the Android fragment does not.
        if (
            not draft.has_type and user_agent_matches(ANDROID_TABLET_PATTERN, user_agent)
        ) or user_agent_matches(OPERA_TABLET_PATTERN, user_agent):
            draft.type = DeviceType.TABLET

    def _type_from_mobile_fragment(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if not draft.has_type and user_agent_matches(ANDROID_MOBILE_PATTERN, user_agent):
            draft.type = DeviceType.SMARTPHONE

    def _type_from_android_version(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        # Android < 2.0 shipped on phones only and 3.x on tablets only.
        # 2.x ran on early tablets too and 4.0 merged both lines, so those
        # stay undecided here.
        if draft.has_type or signals.os_name != "Android" or not signals.os_version:
            return
        version = signals.os_version
        if version_compare(version, "2.0") < 0:
            draft.type = DeviceType.SMARTPHONE
        elif version_compare(version, "3.0") >= 0 and version_compare(version, "4.0") < 0:
            draft.type = DeviceType.TABLET

    def _correct_android_feature_phone(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if draft.type == DeviceType.FEATURE_PHONE and signals.os_family == "Android":
            draft.type = DeviceType.SMARTPHONE

    def _type_from_windows_touch(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        # IE10+ appends a "Touch" token on touch-capable Windows 8+ machines,
        # most of which are tablets.
        if draft.has_type or not user_agent_matches(TOUCH_PATTERN, user_agent):
            return
        if signals.os_name == "Windows RT" or (
            signals.os_name == "Windows"
            and signals.os_version
            and version_compare(signals.os_version, "8.0") >= 0
        ):
            draft.type = DeviceType.TABLET

    def _type_from_opera_tv_store(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if user_agent_matches(OPERA_TV_STORE_PATTERN, user_agent):
            draft.type = DeviceType.TELEVISION

    def _type_from_tv_browser(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if not draft.has_type and signals.client_name in TV_BROWSER_CLIENTS:
            draft.type = DeviceType.TELEVISION

    def _type_from_desktop_os(
        self, user_agent: str, draft: _DeviceDraft, signals: _Signals
    ) -> None:
        if not draft.has_type and self._is_desktop(signals):
            draft.type = DeviceType.DESKTOP

    def _is_desktop(self, signals: _Signals) -> bool:
        if signals.os is None:
            return False
        if self._uses_mobile_browser(signals.client):
            return False
        return signals.os_family in self._os_matcher.desktop_families()

    def _uses_mobile_browser(self, client: ClientInfo | None) -> bool:
        if client is None:
            return False
        return client.type == ClientType.BROWSER and self._client_matcher.is_mobile_only_browser(
            client.name
        )
