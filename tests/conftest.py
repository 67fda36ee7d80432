from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from flighthub_api.app.core.config import Settings
from flighthub_api.app.core.store import InMemoryFlightStore
from flighthub_api.app.main import create_app
from flighthub_api.app.schemas.flight import Flight, FlightStatus


def utc(year, month, day, hour=0, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_flight(**overrides) -> Flight:
    fields = dict(
        id=0,
        flight_number="FH100",
        airline="TestAir",
        departure_airport="WLG",
        arrival_airport="AKL",
        departure_time=utc(2025, 11, 26, 9),
        arrival_time=utc(2025, 11, 26, 10),
        status=FlightStatus.SCHEDULED,
    )
    fields.update(overrides)
    return Flight(**fields)


def flight_payload(**overrides) -> dict:
    payload = {
        "flightNumber": "FH300",
        "airline": "CreateAir",
        "departureAirport": "WLG",
        "arrivalAirport": "SYD",
        "departureTime": "2025-11-27T09:00:00Z",
        "arrivalTime": "2025-11-27T11:00:00Z",
        "status": "Scheduled",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store() -> InMemoryFlightStore:
    return InMemoryFlightStore()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        seed_csv_path=str(tmp_path / "missing.csv"),
        rate_limit_requests=0,
    )


@pytest.fixture
def client(test_settings, store):
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as c:
        yield c
