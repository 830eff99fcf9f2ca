"""
Response normalizer - maps upstream records to display records.

Pure functions, no I/O. normalize() is total: any decoded
RawFlightRecord produces a DisplayFlight.
"""

from typing import Iterable, List

from flightlookup.models import AirportEvent, DisplayEndpoint, DisplayFlight, RawFlightRecord


def _endpoint(event: AirportEvent) -> DisplayEndpoint:
    return DisplayEndpoint(
        airport=event.airport or '',
        code=event.iata or '',
        time=event.scheduled or '',
        actual_time=event.actual,
        delay=event.delay,
    )


def flight_number_for(record: RawFlightRecord) -> str:
    """
    Display flight number.

    Airline IATA code followed by the codeshare flight number when the
    flight is codeshared, otherwise the airline IATA code alone.
    """
    airline_code = record.airline.iata or ''
    codeshare = record.codeshare
    if codeshare and codeshare.flight_number:
        return f'{airline_code}{codeshare.flight_number}'
    return airline_code


def normalize(record: RawFlightRecord) -> DisplayFlight:
    """Convert one upstream record to its display form."""
    return DisplayFlight(
        flight_number=flight_number_for(record),
        airline=record.airline.name or '',
        status=record.flight_status or '',
        departure=_endpoint(record.departure),
        arrival=_endpoint(record.arrival),
        aircraft=record.aircraft.iata if record.aircraft else None,
        date=record.flight_date or '',
    )


def normalize_all(records: Iterable[RawFlightRecord]) -> List[DisplayFlight]:
    """Normalize records, preserving order."""
    return [normalize(r) for r in records]
