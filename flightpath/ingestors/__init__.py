"""Flight data provider ingestors."""

from __future__ import annotations

from .base import FlightDataProvider, HTTPIngestor, ProviderError
from .opensky import OpenSkyIngestor
from .readsb import ADSBExchangeIngestor, AirplanesLiveIngestor, ReadsbIngestor

PROVIDERS: dict[str, type[FlightDataProvider]] = {
    AirplanesLiveIngestor.name: AirplanesLiveIngestor,
    ADSBExchangeIngestor.name: ADSBExchangeIngestor,
    OpenSkyIngestor.name: OpenSkyIngestor,
}


def build_provider(name: str, *, timeout: float | None = None) -> FlightDataProvider:
    """Instantiate the ingestor registered under ``name``."""

    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        raise ValueError(f"Unknown flight data provider: {name}") from None
    return provider_cls(timeout=timeout)


__all__ = [
    "ADSBExchangeIngestor",
    "AirplanesLiveIngestor",
    "FlightDataProvider",
    "HTTPIngestor",
    "OpenSkyIngestor",
    "PROVIDERS",
    "ProviderError",
    "ReadsbIngestor",
    "build_provider",
]
