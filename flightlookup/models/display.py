"""
Display-ready flight records.

DisplayFlight is the only shape the browser UI depends on. It is a
flattened subset of RawFlightRecord with camelCase JSON keys.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DisplayEndpoint:
    """One side (departure or arrival) of a displayed flight."""
    airport: str
    code: str
    time: str  # Scheduled
    actual_time: Optional[str] = None
    delay: Optional[int] = None  # Minutes; None is "unknown", distinct from 0

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'code': self.code,
            'time': self.time,
            'actualTime': self.actual_time,
            'delay': self.delay,
        }


@dataclass(frozen=True)
class DisplayFlight:
    """Normalized flight for presentation."""
    flight_number: str
    airline: str
    status: str
    departure: DisplayEndpoint
    arrival: DisplayEndpoint
    date: str
    aircraft: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to the JSON contract consumed by the UI."""
        return {
            'flightNumber': self.flight_number,
            'airline': self.airline,
            'status': self.status,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
            'aircraft': self.aircraft,
            'date': self.date,
        }
