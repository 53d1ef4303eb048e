"""Static airline and aircraft-type lookup tables used to enrich callsigns."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

from flightpath.models.flights import CallsignInfo

# ICAO three-letter carrier designator -> IATA two-character airline code
AIRLINE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "AAL": "AA",
        "DAL": "DL",
        "UAL": "UA",
        "SWA": "WN",
        "JBU": "B6",
        "ASA": "AS",
        "NKS": "NK",
        "FFT": "F9",
        "BAW": "BA",
        "DLH": "LH",
        "AFR": "AF",
        "KLM": "KL",
        "IBE": "IB",
        "AZA": "AZ",
        "ANA": "NH",
        "JAL": "JL",
        "SIA": "SQ",
        "CPA": "CX",
        "QFA": "QF",
        "UAE": "EK",
        "QTR": "QR",
        "ETD": "EY",
        "ACA": "AC",
        "WJA": "WS",
        "AMX": "AM",
        "LAN": "LA",
        "AVA": "AV",
    }
)

# ICAO aircraft type designator -> display name
AIRCRAFT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "B738": "Boeing 737-800",
        "B737": "Boeing 737",
        "B739": "Boeing 737-900",
        "B38M": "Boeing 737 MAX 8",
        "B39M": "Boeing 737 MAX 9",
        "B77W": "Boeing 777-300ER",
        "B772": "Boeing 777-200",
        "B773": "Boeing 777-300",
        "B788": "Boeing 787-8",
        "B789": "Boeing 787-9",
        "B78X": "Boeing 787-10",
        "B763": "Boeing 767-300",
        "B764": "Boeing 767-400",
        "A320": "Airbus A320",
        "A321": "Airbus A321",
        "A319": "Airbus A319",
        "A20N": "Airbus A320neo",
        "A21N": "Airbus A321neo",
        "A339": "Airbus A330-900neo",
        "A333": "Airbus A330-300",
        "A332": "Airbus A330-200",
        "A359": "Airbus A350-900",
        "A35K": "Airbus A350-1000",
        "A388": "Airbus A380-800",
        "E75L": "Embraer E175",
        "E170": "Embraer E170",
        "E190": "Embraer E190",
        "CRJ9": "Bombardier CRJ-900",
        "CRJ7": "Bombardier CRJ-700",
        "DH8D": "Bombardier Dash 8 Q400",
    }
)

UNKNOWN = "Unknown"

_ICAO_CALLSIGN_RE = re.compile(r"^(?P<icao>[A-Z]{3})(?P<number>\d+[A-Z]?)$")


def get_iata_airline_code(icao_code: Optional[str]) -> Optional[str]:
    if not icao_code:
        return None
    return AIRLINE_CODES.get(icao_code)


def get_aircraft_type_name(icao_type: Optional[str]) -> str:
    """Return a display name, echoing unmapped codes and defaulting to "Unknown"."""

    if not icao_type:
        return UNKNOWN
    return AIRCRAFT_TYPES.get(icao_type) or icao_type


def parse_callsign(callsign: Optional[str]) -> CallsignInfo:
    """Split a transponder callsign into IATA airline code and flight number.

    Only callsigns of the form ``AAL123`` / ``DAL45A`` whose carrier is in
    :data:`AIRLINE_CODES` are rewritten (to ``AA 123``). Anything else is
    displayed as given, minus surrounding whitespace.
    """

    if not callsign or callsign == UNKNOWN:
        return CallsignInfo(airline_code=None, flight_number=None, display_callsign=callsign)

    trimmed = callsign.strip()
    match = _ICAO_CALLSIGN_RE.match(trimmed)
    if match:
        iata_code = get_iata_airline_code(match.group("icao"))
        if iata_code:
            flight_number = match.group("number")
            return CallsignInfo(
                airline_code=iata_code,
                flight_number=flight_number,
                display_callsign=f"{iata_code} {flight_number}",
            )

    return CallsignInfo(airline_code=None, flight_number=None, display_callsign=trimmed)


__all__ = [
    "AIRCRAFT_TYPES",
    "AIRLINE_CODES",
    "UNKNOWN",
    "get_aircraft_type_name",
    "get_iata_airline_code",
    "parse_callsign",
]
