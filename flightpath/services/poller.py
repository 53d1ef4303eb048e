"""Periodic poll-format-publish cycle feeding the flights API."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
from typing import Optional

from flightpath.ingestors import FlightDataProvider, ProviderError
from flightpath.models.flights import (
    AircraftObservation,
    FlightSnapshot,
    FormattedFlight,
    GeoPoint,
)
from flightpath.services.formatter import FlightInfoLookup, format_flight

logger = logging.getLogger("flightpath.poller")


class FlightPoller:
    """Poll a provider on a fixed interval and publish the formatted flights.

    Readers call :attr:`snapshot` and always get a complete list: each cycle
    builds a new immutable :class:`FlightSnapshot` and swaps it in with a
    single assignment. A failed cycle keeps the previous snapshot so the
    dashboard keeps showing the last known traffic.
    """

    def __init__(
        self,
        provider: FlightDataProvider,
        *,
        house: GeoPoint,
        radius_miles: float,
        altitude_ceiling_feet: float,
        poll_interval_seconds: float,
        flight_info_lookup: Optional[FlightInfoLookup] = None,
    ) -> None:
        self.provider = provider
        self.house = house
        self.radius_miles = radius_miles
        self.altitude_ceiling_feet = altitude_ceiling_feet
        self.poll_interval_seconds = poll_interval_seconds
        self.flight_info_lookup = flight_info_lookup
        self._snapshot = FlightSnapshot()

    @property
    def snapshot(self) -> FlightSnapshot:
        return self._snapshot

    async def poll_once(self) -> bool:
        """Run one cycle; return True if a new snapshot was published."""

        logger.info("Polling %s for aircraft...", self.provider.name)
        try:
            observations = await self.provider.fetch_observations(
                self.house, self.radius_miles, self.altitude_ceiling_feet
            )
        except ProviderError as exc:
            logger.warning("Keeping previous flights; provider error: %s", exc)
            return False
        except Exception as exc:
            logger.error("Keeping previous flights; unexpected provider failure: %s", exc)
            return False

        flights = await self._format_all(observations)
        self._snapshot = FlightSnapshot(
            flights=tuple(flights), updated_at=datetime.now(timezone.utc)
        )
        logger.info("Published %s flights overhead", len(flights))
        return True

    async def _format_all(
        self, observations: list[AircraftObservation]
    ) -> list[FormattedFlight]:
        positioned = [obs for obs in observations if obs.has_position]
        if len(positioned) != len(observations):
            logger.debug(
                "Dropped %s aircraft without a position",
                len(observations) - len(positioned),
            )

        results = await asyncio.gather(
            *(
                format_flight(
                    obs, self.house, flight_info_lookup=self.flight_info_lookup
                )
                for obs in positioned
            ),
            return_exceptions=True,
        )
        return [result for result in results if isinstance(result, FormattedFlight)]

    async def run(self) -> None:
        """Poll immediately and then on every interval until cancelled."""

        while True:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                logger.info("Flight poller cancelled")
                raise
            except Exception as exc:  # pragma: no cover - defensive logging
                logger.warning("Flight poll cycle failed: %s", exc)

            await asyncio.sleep(self.poll_interval_seconds)


__all__ = ["FlightPoller"]
