"""
Upstream flight records as returned by the AviationStack /flights endpoint.

AviationStack response format (one element of the "data" array):

    flight_date     - YYYY-MM-DD
    flight_status   - scheduled, active, landed, cancelled, incident,
                      diverted, ... (open set, new values do appear)
    departure       - airport, timezone, iata, icao, terminal, gate,
                      delay, scheduled, estimated, actual,
                      estimated_runway, actual_runway
    arrival         - same as departure, plus baggage
    airline         - name, iata, icao
    flight          - number, iata, icao, codeshared
    aircraft        - registration, iata, icao, icao24 (often null)
    live            - position snapshot, only while airborne (often null)

The payload is untrusted input. Every field is modelled as optional and
decoding never fails on a missing or null value.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _str(data: Mapping[str, Any], key: str) -> Optional[str]:
    """Get a string field, or None if missing/null/blank."""
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _int(data: Mapping[str, Any], key: str) -> Optional[int]:
    """Get an integer field, or None if missing or not numeric."""
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _float(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _section(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    """Get a nested object, or None if missing/null/not an object."""
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


@dataclass(frozen=True)
class AirportEvent:
    """Departure or arrival side of a flight."""
    airport: Optional[str] = None
    timezone: Optional[str] = None
    iata: Optional[str] = None
    icao: Optional[str] = None
    terminal: Optional[str] = None
    gate: Optional[str] = None
    baggage: Optional[str] = None  # Arrivals only
    delay: Optional[int] = None  # Minutes; None means unknown, not zero
    scheduled: Optional[str] = None
    estimated: Optional[str] = None
    actual: Optional[str] = None
    estimated_runway: Optional[str] = None
    actual_runway: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'AirportEvent':
        if not data:
            return cls()
        return cls(
            airport=_str(data, 'airport'),
            timezone=_str(data, 'timezone'),
            iata=_str(data, 'iata'),
            icao=_str(data, 'icao'),
            terminal=_str(data, 'terminal'),
            gate=_str(data, 'gate'),
            baggage=_str(data, 'baggage'),
            delay=_int(data, 'delay'),
            scheduled=_str(data, 'scheduled'),
            estimated=_str(data, 'estimated'),
            actual=_str(data, 'actual'),
            estimated_runway=_str(data, 'estimated_runway'),
            actual_runway=_str(data, 'actual_runway'),
        )


@dataclass(frozen=True)
class Airline:
    """Operating airline."""
    name: Optional[str] = None
    iata: Optional[str] = None
    icao: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Airline':
        if not data:
            return cls()
        return cls(
            name=_str(data, 'name'),
            iata=_str(data, 'iata'),
            icao=_str(data, 'icao'),
        )


@dataclass(frozen=True)
class Codeshare:
    """Marketing carrier and flight number for a codeshared flight."""
    airline_name: Optional[str] = None
    airline_iata: Optional[str] = None
    airline_icao: Optional[str] = None
    flight_number: Optional[str] = None
    flight_iata: Optional[str] = None
    flight_icao: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['Codeshare']:
        if not data:
            return None
        return cls(
            airline_name=_str(data, 'airline_name'),
            airline_iata=_str(data, 'airline_iata'),
            airline_icao=_str(data, 'airline_icao'),
            flight_number=_str(data, 'flight_number'),
            flight_iata=_str(data, 'flight_iata'),
            flight_icao=_str(data, 'flight_icao'),
        )


@dataclass(frozen=True)
class FlightIdentity:
    """Flight number in its numeric, IATA and ICAO forms."""
    number: Optional[str] = None
    iata: Optional[str] = None
    icao: Optional[str] = None
    codeshared: Optional[Codeshare] = None

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[str, Any]],
        codeshared: Optional[Codeshare] = None,
    ) -> 'FlightIdentity':
        if not data:
            return cls(codeshared=codeshared)
        return cls(
            number=_str(data, 'number'),
            iata=_str(data, 'iata'),
            icao=_str(data, 'icao'),
            codeshared=Codeshare.from_dict(_section(data, 'codeshared')) or codeshared,
        )


@dataclass(frozen=True)
class Aircraft:
    """Airframe assigned to the flight."""
    registration: Optional[str] = None
    iata: Optional[str] = None  # Type code, e.g. "A21N"
    icao: Optional[str] = None
    icao24: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['Aircraft']:
        if not data:
            return None
        return cls(
            registration=_str(data, 'registration'),
            iata=_str(data, 'iata'),
            icao=_str(data, 'icao'),
            icao24=_str(data, 'icao24'),
        )


@dataclass(frozen=True)
class LiveTelemetry:
    """Position snapshot, present only for active flights."""
    updated: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    direction: Optional[float] = None
    speed_horizontal: Optional[float] = None
    speed_vertical: Optional[float] = None
    is_ground: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['LiveTelemetry']:
        if not data:
            return None
        return cls(
            updated=_str(data, 'updated'),
            latitude=_float(data, 'latitude'),
            longitude=_float(data, 'longitude'),
            altitude=_float(data, 'altitude'),
            direction=_float(data, 'direction'),
            speed_horizontal=_float(data, 'speed_horizontal'),
            speed_vertical=_float(data, 'speed_vertical'),
            is_ground=bool(data.get('is_ground')),
        )


@dataclass(frozen=True)
class RawFlightRecord:
    """
    One flight as reported upstream.

    Departure, arrival, airline and flight identity are always present
    (possibly with every field None); aircraft and live are None when the
    upstream has nothing to report.
    """
    flight_date: Optional[str]
    flight_status: Optional[str]
    departure: AirportEvent
    arrival: AirportEvent
    airline: Airline
    flight: FlightIdentity
    aircraft: Optional[Aircraft] = None
    live: Optional[LiveTelemetry] = None

    @property
    def codeshare(self) -> Optional[Codeshare]:
        return self.flight.codeshared

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'RawFlightRecord':
        """
        Decode one element of the upstream "data" array.

        Raises ValueError only if the element is not a JSON object.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f'Expected flight object, got {type(data).__name__}')

        # Older responses carry codeshares as a top-level list
        legacy_codeshare = None
        codeshare_list = data.get('codeshare')
        if isinstance(codeshare_list, list) and codeshare_list and isinstance(codeshare_list[0], Mapping):
            legacy_codeshare = Codeshare.from_dict(codeshare_list[0])

        return cls(
            flight_date=_str(data, 'flight_date'),
            flight_status=_str(data, 'flight_status'),
            departure=AirportEvent.from_dict(_section(data, 'departure')),
            arrival=AirportEvent.from_dict(_section(data, 'arrival')),
            airline=Airline.from_dict(_section(data, 'airline')),
            flight=FlightIdentity.from_dict(_section(data, 'flight'), codeshared=legacy_codeshare),
            aircraft=Aircraft.from_dict(_section(data, 'aircraft')),
            live=LiveTelemetry.from_dict(_section(data, 'live')),
        )
