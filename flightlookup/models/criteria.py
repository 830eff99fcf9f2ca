"""Search criteria shared by the search and track lookup modes."""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional


def _clean(value: Any, upper: bool = False) -> Optional[str]:
    """Strip a request value; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    return value.upper() if upper else value


@dataclass(frozen=True)
class SearchCriteria:
    """
    Optional filters for an upstream flight query.

    Airport codes and flight numbers are IATA codes. Absent filters are
    None and are left out of the upstream request entirely.
    """
    departure: Optional[str] = None
    arrival: Optional[str] = None
    date: Optional[str] = None  # YYYY-MM-DD
    flight_number: Optional[str] = None
    status: Optional[str] = None
    limit: Optional[int] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'SearchCriteria':
        """
        Build criteria from request query arguments.

        Accepts flightNumber, or flightIata as used by older clients.
        """
        return cls(
            departure=_clean(args.get('departure'), upper=True),
            arrival=_clean(args.get('arrival'), upper=True),
            date=_clean(args.get('date')),
            flight_number=_clean(args.get('flightNumber') or args.get('flightIata'), upper=True),
            status=_clean(args.get('status')),
        )

    @classmethod
    def for_flight_number(cls, flight_number: str) -> 'SearchCriteria':
        """Criteria for an exact flight-number lookup (single match)."""
        return cls(flight_number=_clean(flight_number, upper=True), limit=1)

    @property
    def has_filters(self) -> bool:
        """True if at least one meaningful filter is set."""
        return any((self.departure, self.arrival, self.date, self.flight_number))

    def with_limit(self, limit: int) -> 'SearchCriteria':
        return replace(self, limit=limit)
