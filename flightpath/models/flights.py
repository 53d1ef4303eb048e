"""Models for observed aircraft and the enriched flights served to the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 position in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class ApproachResult:
    """Projected closest approach of an aircraft to the house."""

    current_distance: float
    closest_distance: float
    time_to_closest: int
    is_direct_flyover: bool


@dataclass(frozen=True)
class CallsignInfo:
    airline_code: Optional[str]
    flight_number: Optional[str]
    display_callsign: Optional[str]


class AircraftObservation(BaseModel):
    """Provider-neutral snapshot of one aircraft for a single poll cycle."""

    flight: Optional[str] = Field(default=None, description="Transponder callsign")
    registration: Optional[str] = Field(default=None, description="Tail number")
    type: Optional[str] = Field(
        default=None, description="ICAO aircraft type designator"
    )
    lat: Optional[float] = Field(default=None, description="Latitude in decimal degrees")
    lon: Optional[float] = Field(default=None, description="Longitude in decimal degrees")
    altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in feet"
    )
    ground_speed: Optional[float] = Field(
        default=None, description="Ground speed in knots"
    )
    track: Optional[float] = Field(
        default=None, description="Track over ground in degrees"
    )

    model_config = ConfigDict(extra="ignore")

    @property
    def has_position(self) -> bool:
        return self.lat is not None and self.lon is not None


class FlightInfo(BaseModel):
    """Route details for a flight, as reported by a flight-info lookup."""

    origin: str = Field(default="Unknown", description="Origin airport")
    destination: str = Field(default="Unknown", description="Destination airport")


class FormattedFlight(BaseModel):
    """Enriched flight record served to dashboard clients."""

    callsign: Optional[str] = Field(default=None, description="Display callsign")
    airline_code: Optional[str] = Field(default=None, description="IATA airline code")
    flight_number: Optional[str] = Field(default=None, description="Flight number")
    registration: Optional[str] = Field(default=None, description="Tail number")
    origin: str = Field(default="Unknown", description="Origin airport")
    destination: str = Field(default="Unknown", description="Destination airport")
    equipment: str = Field(default="Unknown", description="Aircraft type display name")
    aircraft_type: Optional[str] = Field(
        default=None, description="ICAO aircraft type designator"
    )
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    altitude: Optional[float] = Field(default=None, description="Altitude in feet")
    speed: Optional[float] = Field(default=None, description="Ground speed in knots")
    heading: Optional[float] = Field(default=None, description="Track in degrees")
    bearing: float = Field(..., description="Bearing from the house in degrees")
    direction: str = Field(..., description="Compass point of the bearing")
    current_distance: float = Field(..., description="Distance from the house in miles")
    closest_distance: float = Field(
        ..., description="Projected closest approach distance in miles"
    )
    time_to_closest: int = Field(
        ..., description="Seconds until the projected closest approach"
    )
    is_direct_flyover: bool = Field(
        ..., description="Whether the projected path passes over the house"
    )
    last_update: int = Field(
        ..., description="Epoch milliseconds when this record was computed"
    )

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


@dataclass(frozen=True)
class FlightSnapshot:
    """Complete list of flights published by one poll cycle."""

    flights: tuple[FormattedFlight, ...] = field(default_factory=tuple)
    updated_at: Optional[datetime] = None


__all__ = [
    "AircraftObservation",
    "ApproachResult",
    "CallsignInfo",
    "FlightInfo",
    "FlightSnapshot",
    "FormattedFlight",
    "GeoPoint",
]
