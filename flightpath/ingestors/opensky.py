"""OpenSky Network ingestor using the ``/states/all`` bounding-box query."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from flightpath.config import settings
from flightpath.ingestors.base import (
    FEET_TO_METERS,
    HTTPIngestor,
    as_float,
    clean_callsign,
)
from flightpath.models.flights import AircraftObservation, GeoPoint

# Rough conversion used to size the query box around the house
MILES_TO_DEGREES = 1 / 69


def _m_to_feet(value_m: Any) -> float | None:
    value = as_float(value_m)
    return round(value * 3.28084) if value is not None else None


def _ms_to_knots(value_ms: Any) -> float | None:
    value = as_float(value_ms)
    return round(value * 1.94384) if value is not None else None


def _state_value(entry: list | tuple, index: int) -> Any:
    return entry[index] if len(entry) > index else None


class OpenSkyIngestor(HTTPIngestor):
    """Fetch state vectors inside a square box centred on the house."""

    name = "opensky"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.opensky_base_url,
            timeout=timeout,
            transport=transport,
        )

    async def fetch_observations(
        self, center: GeoPoint, radius_miles: float, altitude_ceiling_feet: float
    ) -> list[AircraftObservation]:
        box_size = radius_miles * MILES_TO_DEGREES
        params = {
            "lamin": center.latitude - box_size,
            "lomin": center.longitude - box_size,
            "lamax": center.latitude + box_size,
            "lomax": center.longitude + box_size,
        }

        payload = await self._get_json(self.base_url, params=params)

        raw_states = []
        if isinstance(payload, dict):
            raw_states = payload.get("states") or []

        ceiling_m = altitude_ceiling_feet * FEET_TO_METERS
        observations: list[AircraftObservation] = []
        for entry in raw_states:
            observation = self._normalize_state(entry, ceiling_m)
            if observation:
                observations.append(observation)

        self.logger.debug(
            "Received %s state vectors, kept %s", len(raw_states), len(observations)
        )
        return observations

    def _normalize_state(
        self, entry: Any, ceiling_m: float
    ) -> Optional[AircraftObservation]:
        if not isinstance(entry, (list, tuple)) or len(entry) < 8:
            return None

        altitude_m = as_float(entry[7])
        if altitude_m is None or altitude_m >= ceiling_m:
            return None

        return AircraftObservation(
            flight=clean_callsign(entry[1]),
            registration=None,
            type=None,
            lat=as_float(entry[6]),
            lon=as_float(entry[5]),
            altitude=_m_to_feet(altitude_m),
            ground_speed=_ms_to_knots(_state_value(entry, 9)),
            track=as_float(_state_value(entry, 10)),
        )


__all__ = ["OpenSkyIngestor"]
