"""
Error taxonomy for flight lookups.

Every failure raised by the client, normalizer or lookup service is a
FlightLookupError. Each carries the HTTP status the API layer answers
with, so the boundary can translate any of them without a lookup table.
"""

from typing import Optional


class FlightLookupError(Exception):
    """Base class for all lookup failures."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationError(FlightLookupError):
    """Caller supplied insufficient or malformed input. No upstream call is made."""
    status_code = 400


class ConfigurationError(FlightLookupError):
    """The upstream credential is missing."""


class UpstreamError(FlightLookupError):
    """The flight-data API answered with a failure or an unreadable envelope."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class TransportError(FlightLookupError):
    """Network-level failure talking to the flight-data API (DNS, timeout, reset)."""


class FlightNotFound(FlightLookupError):
    """An exact flight-number lookup matched nothing."""
    status_code = 404

    def __init__(self, message: str = 'Flight not found'):
        super().__init__(message)
