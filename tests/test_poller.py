import asyncio
import math

import pytest

from flightpath.domain.geometry import EARTH_RADIUS_MILES
from flightpath.ingestors import ProviderError
from flightpath.models import AircraftObservation, GeoPoint
from flightpath.services.poller import FlightPoller

HOUSE = GeoPoint(40.0, -75.0)
TEN_MILES_NORTH = HOUSE.latitude + math.degrees(10 / EARTH_RADIUS_MILES)


class FakeProvider:
    name = "fake"

    def __init__(self, observations=None, fail: bool = False):
        self.observations = observations or []
        self.fail = fail
        self.calls: list[tuple] = []

    async def fetch_observations(self, center, radius_miles, altitude_ceiling_feet):
        self.calls.append((center, radius_miles, altitude_ceiling_feet))
        if self.fail:
            raise ProviderError("provider down")
        return list(self.observations)


def _inbound(**overrides):
    values = {
        "flight": "UAL456",
        "type": "A320",
        "lat": TEN_MILES_NORTH,
        "lon": HOUSE.longitude,
        "altitude": 5000,
        "ground_speed": 300,
        "track": 180.0,
    }
    values.update(overrides)
    return AircraftObservation(**values)


def _poller(provider, **kwargs):
    return FlightPoller(
        provider,
        house=HOUSE,
        radius_miles=kwargs.pop("radius_miles", 5),
        altitude_ceiling_feet=kwargs.pop("altitude_ceiling_feet", 15000),
        poll_interval_seconds=kwargs.pop("poll_interval_seconds", 60),
        **kwargs,
    )


@pytest.mark.anyio
async def test_poll_once_publishes_inbound_flight():
    provider = FakeProvider([_inbound()])
    poller = _poller(provider, radius_miles=12, altitude_ceiling_feet=10000)

    assert poller.snapshot.flights == ()
    assert poller.snapshot.updated_at is None

    published = await poller.poll_once()

    assert published is True
    assert provider.calls == [(HOUSE, 12, 10000)]
    assert poller.snapshot.updated_at is not None
    [flight] = poller.snapshot.flights
    assert flight.callsign == "UA 456"
    assert flight.equipment == "Airbus A320"
    assert flight.time_to_closest == pytest.approx(10 / (300 * 1.15078) * 3600, abs=1)
    assert flight.time_to_closest == 104
    assert flight.is_direct_flyover is True


@pytest.mark.anyio
async def test_poll_once_drops_records_without_position():
    provider = FakeProvider([_inbound(), _inbound(flight="DAL1", lat=None)])
    poller = _poller(provider)

    await poller.poll_once()

    assert [f.callsign for f in poller.snapshot.flights] == ["UA 456"]


@pytest.mark.anyio
async def test_poll_once_bad_record_does_not_drop_batch():
    bad = AircraftObservation.model_construct(
        flight="JBU7", type=None, registration=None, lat=40.1, lon="east",
        altitude=3000, ground_speed=200, track=90.0,
    )
    provider = FakeProvider([bad, _inbound()])
    poller = _poller(provider)

    assert await poller.poll_once() is True

    assert [f.callsign for f in poller.snapshot.flights] == ["UA 456"]


@pytest.mark.anyio
async def test_provider_failure_keeps_previous_snapshot():
    provider = FakeProvider([_inbound()])
    poller = _poller(provider)
    await poller.poll_once()
    previous = poller.snapshot

    provider.fail = True
    published = await poller.poll_once()

    assert published is False
    assert poller.snapshot is previous
    assert len(poller.snapshot.flights) == 1


@pytest.mark.anyio
async def test_unexpected_provider_exception_keeps_previous_snapshot():
    class ExplodingProvider(FakeProvider):
        async def fetch_observations(self, center, radius_miles, altitude_ceiling_feet):
            raise KeyError("states")

    poller = _poller(ExplodingProvider())

    assert await poller.poll_once() is False
    assert poller.snapshot.flights == ()


@pytest.mark.anyio
async def test_empty_poll_replaces_list():
    provider = FakeProvider([_inbound()])
    poller = _poller(provider)
    await poller.poll_once()

    provider.observations = []
    await poller.poll_once()

    assert poller.snapshot.flights == ()
    assert poller.snapshot.updated_at is not None


@pytest.mark.anyio
async def test_run_polls_until_cancelled():
    provider = FakeProvider([_inbound()])
    poller = _poller(provider, poll_interval_seconds=0.01)

    task = asyncio.create_task(poller.run())
    for _ in range(100):
        await asyncio.sleep(0.01)
        if len(provider.calls) >= 2:
            break
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert len(provider.calls) >= 2
    assert len(poller.snapshot.flights) == 1
