"""Detection cache protocol.

Port for the per-detector result cache. Keys are raw user-agent strings
(not normalized); values are finished DetectionResult records.

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: uadetect/infrastructure/cache/detection_cache.py
    - Owned by a single DeviceDetector instance (never shared between
      detectors with different settings)
"""

from typing import Protocol

from uadetect.domain.value_objects import DetectionResult


class DetectionCacheProtocol(Protocol):
    """Result cache keyed by user-agent string.

    Implementations must be safe to call from several threads. Two threads
    missing on the same key and both storing a result is acceptable.
    """

    def get(self, key: str) -> DetectionResult | None:
        """Look up a cached result.

        Args:
            key: Raw user-agent string.

        Returns:
            The cached result, or None when absent or expired.
        """
        ...

    def set(self, key: str, value: DetectionResult) -> None:
        """Store a result, overwriting any previous entry.

        Args:
            key: Raw user-agent string.
            value: Finished detection result.
        """
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...

    def __len__(self) -> int:
        """Number of stored entries (expired entries may still be counted)."""
        ...
