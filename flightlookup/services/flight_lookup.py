"""
Flight lookup service - the two query modes behind the API.

- search: any combination of departure/arrival/date/flight number,
  zero or more matches
- track: exact flight number, a single match or FlightNotFound

Both modes go through the same client and return DisplayFlight records.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from flightlookup.errors import FlightNotFound, ValidationError
from flightlookup.models import DisplayFlight, SearchCriteria
from flightlookup.services.aviationstack import AviationStackClient
from flightlookup.services.normalizer import normalize, normalize_all

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Result of a filtered search, in upstream order."""
    flights: List[DisplayFlight] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.flights)

    def to_dict(self) -> dict:
        return {
            'success': True,
            'flights': [f.to_dict() for f in self.flights],
            'count': self.count,
        }


class FlightLookupService:
    """Orchestrates upstream queries and normalization for both lookup modes."""

    SEARCH_LIMIT = 20

    def __init__(self, client: Optional[AviationStackClient] = None):
        self.client = client or AviationStackClient.from_config()

    def search(self, criteria: SearchCriteria) -> SearchResult:
        """
        Search flights by departure, arrival, date and/or flight number.

        Raises:
            ValidationError if no filter is set or the date is malformed
            ConfigurationError, TransportError, UpstreamError from the client
        """
        if not criteria.has_filters:
            raise ValidationError('At least one search parameter is required')

        if criteria.date:
            try:
                parsed = datetime.strptime(criteria.date, '%Y-%m-%d')
            except ValueError:
                raise ValidationError(f'Invalid date {criteria.date!r}, expected YYYY-MM-DD')
            # Upstream only accepts zero-padded dates
            criteria = replace(criteria, date=parsed.strftime('%Y-%m-%d'))

        records = self.client.search(criteria.with_limit(self.SEARCH_LIMIT))
        flights = normalize_all(records)

        logger.info(f'Search {_describe(criteria)} returned {len(flights)} flights')
        return SearchResult(flights=flights)

    def track(self, flight_number: Optional[str]) -> List[DisplayFlight]:
        """
        Look up a single flight by its exact IATA flight number.

        Blank input returns an empty list without calling upstream.

        Raises:
            FlightNotFound if upstream has no matching flight
            ConfigurationError, TransportError, UpstreamError from the client
        """
        if not flight_number or not flight_number.strip():
            return []

        flight_number = flight_number.strip().upper()
        record = self.client.get_by_flight_number(flight_number)
        if record is None:
            logger.info(f'No flight found for {flight_number}')
            raise FlightNotFound()

        logger.info(f'Tracked {flight_number}: {record.flight_status}')
        return [normalize(record)]


def _describe(criteria: SearchCriteria) -> str:
    parts = [
        f'{name}={value}'
        for name, value in (
            ('departure', criteria.departure),
            ('arrival', criteria.arrival),
            ('date', criteria.date),
            ('flight', criteria.flight_number),
        )
        if value
    ]
    return ' '.join(parts)
