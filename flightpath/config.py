"""Configuration settings for the Flightpath tracker."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

logger = logging.getLogger("flightpath.config")

PROVIDER_NAMES = ("airplanes.live", "adsbexchange", "opensky")


class ConfigurationError(RuntimeError):
    """Raised when the service cannot start with the given configuration."""


def _get_float(env_var: str, default: float | None = None) -> float | None:
    """Parse an environment variable into a float, falling back on bad input."""

    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default

    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric value for %s: %r", env_var, value)
        return default


def _get_int(env_var: str, default: int) -> int:
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default

    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer value for %s: %r", env_var, value)
        return default


def _get_list(env_var: str, default: str) -> tuple[str, ...]:
    """Split a comma-separated environment variable into a tuple of values."""

    value = os.getenv(env_var, default)
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    flightpath_env: str = os.getenv("FLIGHTPATH_ENV", "local")
    log_level: str = os.getenv("FLIGHTPATH_LOG_LEVEL", "INFO")

    # Dashboard origins allowed to read the API
    cors_allow_origins: tuple[str, ...] = _get_list("CORS_ALLOW_ORIGINS", "*")

    # House location; both are required before serving starts
    house_lat: float | None = _get_float("HOUSE_LAT")
    house_lon: float | None = _get_float("HOUSE_LON")

    # Search area
    bounding_box_miles: float = _get_float("BOUNDING_BOX_MILES", 5.0) or 5.0
    max_altitude_feet: float = _get_float("MAX_ALTITUDE_FEET", 15000.0) or 15000.0
    poll_interval_seconds: int = _get_int("POLL_INTERVAL_SECONDS", 60) or 60

    # Flight data providers
    flight_data_provider: str = os.getenv("FLIGHT_DATA_PROVIDER", "airplanes.live")
    provider_timeout: float = _get_float("PROVIDER_TIMEOUT", 10.0) or 10.0
    airplanes_live_base_url: str = os.getenv(
        "AIRPLANES_LIVE_BASE_URL", "https://api.airplanes.live/v2"
    )
    adsbexchange_base_url: str = os.getenv(
        "ADSBEXCHANGE_BASE_URL", "https://globe.adsbexchange.com/api/v2"
    )
    opensky_base_url: str = os.getenv(
        "OPENSKY_BASE_URL", "https://opensky-network.org/api/states/all"
    )


def _is_coordinate(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def validate_settings(config: Settings) -> None:
    """Fail fast on configuration the service cannot run with."""

    if not _is_coordinate(config.house_lat) or not _is_coordinate(config.house_lon):
        logger.error("HOUSE_LAT and HOUSE_LON must be set to numeric values")
        raise ConfigurationError("HOUSE_LAT and HOUSE_LON must be set to numeric values")

    if config.flight_data_provider not in PROVIDER_NAMES:
        logger.error("Unknown flight data provider: %s", config.flight_data_provider)
        raise ConfigurationError(
            f"Unknown flight data provider: {config.flight_data_provider}"
        )


settings = Settings()

__all__ = [
    "ConfigurationError",
    "PROVIDER_NAMES",
    "Settings",
    "settings",
    "validate_settings",
]
