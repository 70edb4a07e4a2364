"""12-factor configuration adapter using environment variables."""

import logging
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trans_planner.domain.models.location import LocationPermission
from trans_planner.domain.models.position import Position


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="TRANS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # transport.rest API configuration
    api_base_url: str = Field(
        default="https://v6.db.transport.rest",
        description="Base URL of the transport.rest instance to query",
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="Total timeout for a single API request in seconds"
    )
    search_results: int = Field(
        default=5, description="Maximum number of station suggestions per search"
    )
    nearby_results: int = Field(default=3, description="Maximum number of nearby stops")
    min_query_length: int = Field(
        default=2, description="Queries shorter than this never reach the network"
    )

    # Search behaviour
    debounce_ms: int = Field(
        default=300, description="Quiet period after the last keystroke before searching"
    )

    # Display configuration
    display_timezone: str | None = Field(
        default=None,
        description="IANA timezone for step times; unset keeps each timestamp's own offset",
    )

    # Simulated leg annotations
    annotations_enabled: bool = Field(
        default=True, description="Attach simulated alert/seating/chat hints to transit legs"
    )
    alert_probability: float = Field(default=0.3, description="Chance of an alert hint")
    seating_probability: float = Field(default=0.4, description="Chance of a seating hint")
    max_chat_count: int = Field(default=15, description="Upper bound of the simulated chat count")

    # Location configuration
    home_latitude: float | None = Field(
        default=None, description="Latitude reported by the fixed location platform"
    )
    home_longitude: float | None = Field(
        default=None, description="Longitude reported by the fixed location platform"
    )
    location_permission: LocationPermission = Field(
        default=LocationPermission.GRANTED,
        description="Permission state reported by the fixed location platform",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores any local .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("alert_probability", "seating_probability")
    @classmethod
    def validate_probability(cls, v: float) -> float:
        """Validate probabilities lie within [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("probabilities must be between 0 and 1")
        return v

    @field_validator(
        "request_timeout_seconds", "search_results", "nearby_results", "max_chat_count"
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate timeouts and result counts are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("debounce_ms", "min_query_length")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate durations and lengths are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    @field_validator("display_timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate the timezone is a known IANA name."""
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is one the logging module knows."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def debounce_seconds(self) -> float:
        """Debounce window in seconds."""
        return self.debounce_ms / 1000

    @property
    def search_trigger_length(self) -> int:
        """Shortest text that schedules a debounced search, one above the network cut-off."""
        return self.min_query_length + 1

    @property
    def home_position(self) -> Position | None:
        """Configured fixed position, if both coordinates are set."""
        if self.home_latitude is None or self.home_longitude is None:
            return None
        return Position(latitude=self.home_latitude, longitude=self.home_longitude)
