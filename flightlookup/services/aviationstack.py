"""
AviationStack API client.

Handles communication with the AviationStack /flights endpoint:
- Query building from SearchCriteria (absent filters are omitted)
- Access-key authentication
- Envelope decoding and error classification

AviationStack query keys:
    access_key     - API credential (always sent)
    dep_iata       - departure airport IATA code
    arr_iata       - arrival airport IATA code
    flight_iata    - flight number, e.g. UA1
    flight_status  - scheduled, active, landed, ...
    flight_date    - YYYY-MM-DD
    limit          - max results

Requests are never retried here; retry policy belongs to the caller.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from flightlookup.config import AviationStackConfig, DEFAULT_BASE_URL, config
from flightlookup.errors import ConfigurationError, TransportError, UpstreamError
from flightlookup.models import RawFlightRecord, SearchCriteria

logger = logging.getLogger(__name__)

# SearchCriteria attribute -> upstream query key
QUERY_KEYS = (
    ('departure', 'dep_iata'),
    ('arrival', 'arr_iata'),
    ('flight_number', 'flight_iata'),
    ('status', 'flight_status'),
    ('date', 'flight_date'),
    ('limit', 'limit'),
)


class AviationStackClient:
    """
    Client for the AviationStack flights API.

    Handles:
    - GET requests to /flights
    - Mapping search criteria to query parameters
    - Typed errors for configuration, transport and upstream failures
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 10,
        cache_seconds: int = 300,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.cache_seconds = cache_seconds

        self.session = requests.Session()

        # Track API usage
        self._lock = threading.Lock()
        self._request_count = 0
        self._failure_count = 0

    @classmethod
    def from_config(cls, cfg: Optional[AviationStackConfig] = None) -> 'AviationStackClient':
        """Create client from application configuration."""
        cfg = cfg or config.aviationstack
        return cls(
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout=cfg.timeout,
            cache_seconds=cfg.cache_seconds,
        )

    def build_params(self, criteria: SearchCriteria) -> Dict[str, Any]:
        """Convert criteria to upstream query parameters, omitting absent filters."""
        params: Dict[str, Any] = {'access_key': self.api_key}
        for attr, key in QUERY_KEYS:
            value = getattr(criteria, attr)
            if value:
                params[key] = value
        return params

    def search(self, criteria: SearchCriteria) -> List[RawFlightRecord]:
        """
        Fetch flights matching the given criteria.

        Returns:
            Records in upstream order. An empty list means upstream found
            no matches, which is not an error.

        Raises:
            ConfigurationError if no access key is configured (no request is made)
            TransportError on DNS, timeout or connection failures
            UpstreamError on non-2xx status or an unreadable/error envelope
        """
        if not self.api_key:
            raise ConfigurationError('Flight API key is not configured')

        url = f'{self.base_url}/flights'
        params = self.build_params(criteria)

        logger.debug(f'Fetching flights: {url} filters={_redact(params)}')

        try:
            response = self.session.get(
                url,
                params=params,
                headers={
                    'Accept': 'application/json',
                    'Cache-Control': f'max-age={self.cache_seconds}',
                },
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            self._record(failed=True)
            logger.error('AviationStack API timeout')
            raise TransportError('Flight API request timed out') from e
        except requests.exceptions.RequestException as e:
            self._record(failed=True)
            # Exception text carries the request URL, access key included
            logger.error(f'AviationStack request failed: {type(e).__name__}')
            raise TransportError('Flight API request failed') from e

        if not response.ok:
            self._record(failed=True)
            logger.error(f'AviationStack API error: {response.status_code}')
            raise UpstreamError(
                f'API request failed: {response.status_code}',
                upstream_status=response.status_code,
            )

        try:
            flights_raw = self._decode_envelope(response)
        except UpstreamError:
            self._record(failed=True)
            raise

        self._record(failed=False)

        records = []
        for item in flights_raw:
            try:
                records.append(RawFlightRecord.from_dict(item))
            except ValueError as e:
                logger.warning(f'Skipping malformed flight entry: {e}')

        logger.info(f'Received {len(records)} flights from AviationStack')
        return records

    def get_by_flight_number(self, flight_number: str) -> Optional[RawFlightRecord]:
        """Fetch the first flight matching an exact IATA flight number, or None."""
        records = self.search(SearchCriteria.for_flight_number(flight_number))
        if not records:
            logger.debug(f'No flight data found for {flight_number}')
            return None
        return records[0]

    def _decode_envelope(self, response: requests.Response) -> List[Any]:
        """
        Extract the "data" array from a successful response.

        A missing or null "data" key means no matches. Anything else that
        is not a JSON object with a list under "data" is an UpstreamError.
        """
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f'AviationStack returned invalid JSON: {e}')
            raise UpstreamError(
                'Flight API returned an unreadable response',
                upstream_status=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise UpstreamError(
                'Flight API returned an unexpected response',
                upstream_status=response.status_code,
            )

        # AviationStack reports auth and quota problems in the body
        error = body.get('error')
        if error:
            if isinstance(error, dict):
                detail = error.get('message') or error.get('code') or 'unknown error'
            else:
                detail = str(error)
            logger.warning(f'AviationStack API error: {detail}')
            raise UpstreamError(
                f'Flight API error: {detail}',
                upstream_status=response.status_code,
            )

        data = body.get('data')
        if data is None:
            return []
        if not isinstance(data, list):
            raise UpstreamError(
                'Flight API returned an unexpected response',
                upstream_status=response.status_code,
            )
        return data

    def _record(self, failed: bool) -> None:
        with self._lock:
            self._request_count += 1
            if failed:
                self._failure_count += 1

    @property
    def stats(self) -> dict:
        """Get client statistics."""
        with self._lock:
            return {
                'requests': self._request_count,
                'failures': self._failure_count,
                'api_configured': bool(self.api_key),
            }


def _redact(params: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of params safe for logging (no credential)."""
    return {k: v for k, v in params.items() if k != 'access_key'}
