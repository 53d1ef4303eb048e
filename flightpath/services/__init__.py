"""Service-layer helpers for the Flightpath tracker."""

from .formatter import FlightInfoLookup, format_flight
from .poller import FlightPoller

__all__ = ["FlightInfoLookup", "FlightPoller", "format_flight"]
