"""
Value records for flight lookups.

All records are frozen dataclasses built per request and discarded after
the response is sent.
"""

from flightlookup.models.criteria import SearchCriteria
from flightlookup.models.display import DisplayEndpoint, DisplayFlight
from flightlookup.models.raw import (
    Aircraft,
    Airline,
    AirportEvent,
    Codeshare,
    FlightIdentity,
    LiveTelemetry,
    RawFlightRecord,
)

__all__ = [
    'Aircraft',
    'Airline',
    'AirportEvent',
    'Codeshare',
    'DisplayEndpoint',
    'DisplayFlight',
    'FlightIdentity',
    'LiveTelemetry',
    'RawFlightRecord',
    'SearchCriteria',
]
