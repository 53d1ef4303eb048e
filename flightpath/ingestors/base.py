"""Shared plumbing for flight data provider ingestors."""

from __future__ import annotations

import logging
import math
from typing import Any, Protocol

import httpx

from flightpath.config import settings
from flightpath.models.flights import AircraftObservation, GeoPoint

MILES_TO_NM = 0.868976
FEET_TO_METERS = 0.3048


class ProviderError(RuntimeError):
    """Raised when a provider cannot be reached or returns unusable data."""


class FlightDataProvider(Protocol):
    """Interface implemented by every flight data provider."""

    name: str

    async def fetch_observations(
        self, center: GeoPoint, radius_miles: float, altitude_ceiling_feet: float
    ) -> list[AircraftObservation]:
        """Return aircraft near ``center`` below the altitude ceiling."""


class HTTPIngestor:
    """Base class for providers queried with a single JSON GET request."""

    name = "http"

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport
        self.logger = logging.getLogger(f"flightpath.ingestors.{self.name}")

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            self.logger.warning("%s request timed out: %s", self.name, exc)
            raise ProviderError(f"{self.name} request timed out") from exc
        except httpx.HTTPStatusError as exc:
            self.logger.warning(
                "%s returned HTTP %s: %s",
                self.name,
                exc.response.status_code,
                exc.response.text,
            )
            raise ProviderError(
                f"{self.name} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.RequestError as exc:
            self.logger.warning("%s request failed: %s", self.name, exc)
            raise ProviderError(f"{self.name} request failed") from exc

        try:
            return response.json()
        except ValueError as exc:
            self.logger.warning("Failed to parse %s JSON response: %s", self.name, exc)
            raise ProviderError(f"{self.name} returned invalid JSON") from exc


def as_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def clean_callsign(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    return raw.strip() or None


__all__ = [
    "FEET_TO_METERS",
    "FlightDataProvider",
    "HTTPIngestor",
    "MILES_TO_NM",
    "ProviderError",
    "as_float",
    "clean_callsign",
]
