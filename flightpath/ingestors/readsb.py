"""Ingestors for providers serving readsb-style ``{"ac": [...]}`` aircraft lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from flightpath.config import settings
from flightpath.ingestors.base import HTTPIngestor, MILES_TO_NM, as_float, clean_callsign
from flightpath.models.flights import AircraftObservation, GeoPoint


class ReadsbIngestor(HTTPIngestor, ABC):
    """Fetch aircraft within a radius from a readsb-compatible REST API."""

    name = "readsb"

    @abstractmethod
    def _build_url(self, center: GeoPoint, radius_nm: float) -> str:
        """Return the provider URL for a radius query around ``center``."""

    async def fetch_observations(
        self, center: GeoPoint, radius_miles: float, altitude_ceiling_feet: float
    ) -> list[AircraftObservation]:
        radius_nm = radius_miles * MILES_TO_NM
        payload = await self._get_json(self._build_url(center, radius_nm))

        raw_aircraft = []
        if isinstance(payload, dict):
            raw_aircraft = payload.get("ac") or []

        observations: list[AircraftObservation] = []
        for entry in raw_aircraft:
            observation = self._normalize_aircraft(entry, altitude_ceiling_feet)
            if observation:
                observations.append(observation)

        self.logger.debug(
            "Received %s aircraft from %s, kept %s below %s ft",
            len(raw_aircraft),
            self.name,
            len(observations),
            altitude_ceiling_feet,
        )
        return observations

    def _normalize_aircraft(
        self, entry: Any, altitude_ceiling_feet: float
    ) -> Optional[AircraftObservation]:
        if not isinstance(entry, dict):
            return None

        # alt_baro is "ground" for surface traffic; any string counts as on-ground
        altitude = entry.get("alt_baro")
        if altitude is None or isinstance(altitude, str):
            return None
        altitude = as_float(altitude)
        if altitude is None or altitude >= altitude_ceiling_feet:
            return None

        return AircraftObservation(
            flight=clean_callsign(entry.get("flight")),
            registration=clean_callsign(entry.get("r")),
            type=clean_callsign(entry.get("t")),
            lat=as_float(entry.get("lat")),
            lon=as_float(entry.get("lon")),
            altitude=altitude,
            ground_speed=as_float(entry.get("gs")),
            track=as_float(entry.get("track")),
        )


class AirplanesLiveIngestor(ReadsbIngestor):
    """airplanes.live point query: ``/point/{lat}/{lon}/{radius_nm}``."""

    name = "airplanes.live"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.airplanes_live_base_url,
            timeout=timeout,
            transport=transport,
        )

    def _build_url(self, center: GeoPoint, radius_nm: float) -> str:
        return f"{self.base_url}/point/{center.latitude}/{center.longitude}/{radius_nm}"


class ADSBExchangeIngestor(ReadsbIngestor):
    """ADS-B Exchange distance query: ``/lat/{lat}/lon/{lon}/dist/{radius_nm}``."""

    name = "adsbexchange"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.adsbexchange_base_url,
            timeout=timeout,
            transport=transport,
        )

    def _build_url(self, center: GeoPoint, radius_nm: float) -> str:
        return (
            f"{self.base_url}/lat/{center.latitude}/lon/{center.longitude}"
            f"/dist/{radius_nm}"
        )


__all__ = ["ADSBExchangeIngestor", "AirplanesLiveIngestor", "ReadsbIngestor"]
