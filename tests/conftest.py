"""Pytest configuration and fixtures."""

import copy
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the package is importable when running tests without installing it
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from flightlookup.services.aviationstack import AviationStackClient  # noqa: E402


# Sample flight matching the AviationStack /flights "data" element structure
UA1_FLIGHT = {
    "flight_date": "2024-05-01",
    "flight_status": "active",
    "departure": {
        "airport": "John F Kennedy International",
        "timezone": "America/New_York",
        "iata": "JFK",
        "icao": "KJFK",
        "terminal": "7",
        "gate": "B22",
        "delay": 14,
        "scheduled": "2024-05-01T08:00:00+00:00",
        "estimated": "2024-05-01T08:00:00+00:00",
        "actual": "2024-05-01T08:14:00+00:00",
        "estimated_runway": None,
        "actual_runway": None,
    },
    "arrival": {
        "airport": "Los Angeles International",
        "timezone": "America/Los_Angeles",
        "iata": "LAX",
        "icao": "KLAX",
        "terminal": "7",
        "gate": None,
        "baggage": None,
        "delay": None,
        "scheduled": "2024-05-01T11:20:00+00:00",
        "estimated": "2024-05-01T11:20:00+00:00",
        "actual": None,
        "estimated_runway": None,
        "actual_runway": None,
    },
    "airline": {"name": "United Airlines", "iata": "UA", "icao": "UAL"},
    "flight": {
        "number": "1",
        "iata": "UA1",
        "icao": "UAL1",
        "codeshared": None,
    },
    "aircraft": {
        "registration": "N12345",
        "iata": "B77W",
        "icao": "B77W",
        "icao24": "A1B2C3",
    },
    "live": None,
}

# Codeshared flight marketed by Lufthansa, operated by United
LH_CODESHARE_FLIGHT = {
    "flight_date": "2024-05-01",
    "flight_status": "scheduled",
    "departure": {
        "airport": "John F Kennedy International",
        "iata": "JFK",
        "icao": "KJFK",
        "delay": 0,
        "scheduled": "2024-05-01T09:30:00+00:00",
        "estimated": "2024-05-01T09:30:00+00:00",
        "actual": None,
    },
    "arrival": {
        "airport": "Los Angeles International",
        "iata": "LAX",
        "icao": "KLAX",
        "scheduled": "2024-05-01T12:45:00+00:00",
        "estimated": "2024-05-01T12:45:00+00:00",
    },
    "airline": {"name": "Lufthansa", "iata": "LH", "icao": "DLH"},
    "flight": {
        "number": "7601",
        "iata": "LH7601",
        "icao": "DLH7601",
        "codeshared": {
            "airline_name": "united airlines",
            "airline_iata": "ua",
            "airline_icao": "ual",
            "flight_number": "523",
            "flight_iata": "ua523",
            "flight_icao": "ual523",
        },
    },
    "aircraft": None,
    "live": None,
}

# Only the fields that are always present; everything optional is absent or null
MINIMAL_FLIGHT = {
    "flight_date": None,
    "flight_status": None,
    "departure": {"airport": "Denver International", "iata": "DEN", "scheduled": "2024-05-01T10:00:00+00:00"},
    "arrival": {"airport": "Seattle-Tacoma International", "iata": "SEA", "scheduled": "2024-05-01T12:00:00+00:00"},
    "airline": None,
    "flight": None,
    "aircraft": None,
    "live": None,
}


def make_response(body=None, status_code: int = 200) -> MagicMock:
    """Build a mocked requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body
    return response


def envelope(*flights) -> dict:
    return {
        "pagination": {"limit": 20, "offset": 0, "count": len(flights), "total": len(flights)},
        "data": [copy.deepcopy(f) for f in flights],
    }


@pytest.fixture
def ua1_flight() -> dict:
    return copy.deepcopy(UA1_FLIGHT)


@pytest.fixture
def codeshare_flight() -> dict:
    return copy.deepcopy(LH_CODESHARE_FLIGHT)


@pytest.fixture
def minimal_flight() -> dict:
    return copy.deepcopy(MINIMAL_FLIGHT)


@pytest.fixture
def client() -> AviationStackClient:
    """AviationStack client with a mocked HTTP session."""
    c = AviationStackClient(api_key="test-key", base_url="https://upstream.test/v1")
    c.session = MagicMock()
    c.session.get.return_value = make_response(envelope())
    return c
