"""Domain protocols (ports).

Usage:
    from uadetect.domain.protocols import LoggerProtocol, OsMatcherProtocol
"""

from uadetect.domain.protocols.detection_cache_protocol import DetectionCacheProtocol
from uadetect.domain.protocols.logger_protocol import LoggerProtocol
from uadetect.domain.protocols.matcher_protocol import (
    BotMatcherProtocol,
    ClientMatcherProtocol,
    DeviceMatcherProtocol,
    OsMatcherProtocol,
    VendorFragmentMatcherProtocol,
)
from uadetect.domain.protocols.session_enricher_protocol import (
    DeviceEnricher,
    DeviceEnrichmentResult,
)

__all__ = [
    "BotMatcherProtocol",
    "ClientMatcherProtocol",
    "DetectionCacheProtocol",
    "DeviceEnricher",
    "DeviceEnrichmentResult",
    "DeviceMatcherProtocol",
    "LoggerProtocol",
    "OsMatcherProtocol",
    "VendorFragmentMatcherProtocol",
]
