"""Data models for the Flightpath tracker."""

from .flights import (
    AircraftObservation,
    ApproachResult,
    CallsignInfo,
    FlightInfo,
    FlightSnapshot,
    FormattedFlight,
    GeoPoint,
)
from .status import StatusResponse

__all__ = [
    "AircraftObservation",
    "ApproachResult",
    "CallsignInfo",
    "FlightInfo",
    "FlightSnapshot",
    "FormattedFlight",
    "GeoPoint",
    "StatusResponse",
]
