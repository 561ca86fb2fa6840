"""
Configuration management using Pydantic Settings.

Type-safe, validated detector configuration loaded from environment
variables (prefix ``UADETECT_``) or passed explicitly.

Architecture:
- Flat Settings structure (no nesting)
- Environment variables override defaults
- Type validation via Pydantic
- Validation failures surface as ConfigurationError through
  validate_detector_settings() (Result type)

Usage:
    from uadetect.core.config import get_settings

    settings = get_settings()
    if settings.cache is False:
        ...

    # Explicit settings (tests, embedding applications)
    from uadetect.core.config import DetectorSettings
    settings = DetectorSettings(skip_bot_detection=True, cache=300)
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uadetect.core.enums import Environment, ErrorCode
from uadetect.core.errors import ConfigurationError
from uadetect.core.result import Failure, Result, Success

VERSION_TRUNCATION_LEVELS = (0, 1, 2, 3)

# Field name -> error code reported when pydantic rejects that field.
_FIELD_ERROR_CODES: dict[str, ErrorCode] = {
    "version_truncation": ErrorCode.INVALID_VERSION_TRUNCATION,
    "cache": ErrorCode.INVALID_CACHE_TTL,
    "cache_max_entries": ErrorCode.INVALID_CACHE_CAPACITY,
}


class DetectorSettings(BaseSettings):
    """
    Detector settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (``UADETECT_*``)
        3. Default values

    Returns:
        DetectorSettings: Validated detector configuration.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Detection behavior
    skip_bot_detection: bool = Field(
        default=False,
        description="Skip the bot matcher entirely (result.bot is always None)",
    )
    version_truncation: int | None = Field(
        default=1,
        description="Version precision reported by matchers: 0 (major), 1 (minor), "
        "2 (patch), 3 (build) or None (no truncation)",
    )

    # Result cache
    cache: bool | float = Field(
        default=True,
        description="True caches forever, a positive number is a TTL in seconds, "
        "False disables caching",
    )
    cache_max_entries: int = Field(
        default=5000,
        description="Maximum number of cached results (least recently used evicted first)",
    )

    model_config = SettingsConfigDict(
        env_prefix="UADETECT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("version_truncation", mode="before")
    @classmethod
    def parse_no_truncation(cls, v: Any) -> Any:
        """
        Accept "none" / empty strings from the environment as no truncation.

        Args:
            v: Raw value.

        Returns:
            Any: None for the no-truncation spellings, the raw value otherwise.
        """
        if isinstance(v, str) and v.strip().lower() in {"", "none", "null"}:
            return None
        return v

    @field_validator("version_truncation")
    @classmethod
    def validate_version_truncation(cls, v: int | None) -> int | None:
        """
        Validate truncation level.

        Args:
            v: Truncation level.

        Returns:
            int | None: Validated level.

        Raises:
            ValueError: If level is not 0, 1, 2, 3 or None.
        """
        if v is not None and v not in VERSION_TRUNCATION_LEVELS:
            raise ValueError("version_truncation must be one of 0, 1, 2, 3 or None")
        return v

    @field_validator("cache", mode="before")
    @classmethod
    def parse_cache(cls, v: Any) -> Any:
        """
        Read environment strings as a switch or a TTL.

        Only "true" / "false" are switches; numeric strings are TTLs, so
        UADETECT_CACHE=1 means one second and UADETECT_CACHE=0 is rejected.

        Args:
            v: Raw value.

        Returns:
            Any: bool for the switch spellings, float for numeric strings,
                the raw value otherwise.
        """
        if not isinstance(v, str):
            return v
        lowered = v.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        try:
            return float(lowered)
        except ValueError:
            return v

    @field_validator("cache")
    @classmethod
    def validate_cache(cls, v: bool | float) -> bool | float:
        """
        Validate cache lifetime.

        Args:
            v: True, False or a TTL in seconds.

        Returns:
            bool | float: Validated cache setting.

        Raises:
            ValueError: If the TTL is zero or negative.
        """
        if isinstance(v, bool):
            return v
        if v <= 0:
            raise ValueError("cache TTL must be a positive number of seconds")
        return v

    @field_validator("cache_max_entries")
    @classmethod
    def validate_cache_max_entries(cls, v: int) -> int:
        """
        Validate cache capacity.

        Raises:
            ValueError: If capacity is not positive.
        """
        if v <= 0:
            raise ValueError("cache_max_entries must be positive")
        return v

    @property
    def cache_enabled(self) -> bool:
        """
        Check if results are cached at all.

        Returns:
            bool: False only when cache is explicitly disabled.
        """
        return self.cache is not False

    @property
    def cache_ttl(self) -> float | None:
        """
        Cache entry lifetime in seconds.

        Returns:
            float | None: TTL in seconds, None when entries never expire
                (or caching is disabled).
        """
        if isinstance(self.cache, bool):
            return None
        return float(self.cache)

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


def validate_detector_settings(
    **values: Any,
) -> Result[DetectorSettings, ConfigurationError]:
    """
    Build DetectorSettings, reporting problems as data.

    Args:
        **values: Explicit settings values (unset fields fall back to the
            environment and defaults).

    Returns:
        Success with DetectorSettings, Failure with ConfigurationError for the
        first rejected field.
    """
    try:
        return Success(value=DetectorSettings(**values))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        return Failure(
            error=ConfigurationError(
                code=_FIELD_ERROR_CODES.get(field or "", ErrorCode.CONFIGURATION_INVALID),
                message=first["msg"],
                field=field,
                details={"error_count": exc.error_count()},
            )
        )


@lru_cache
def get_settings() -> DetectorSettings:
    """
    Get cached settings instance.

    Loaded once per process from the environment, on first call (never at
    import time).

    Returns:
        DetectorSettings: Cached settings instance.

    Raises:
        ValidationError: If a UADETECT_* variable is invalid.
    """
    return DetectorSettings()

