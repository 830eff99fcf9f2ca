"""
Flight lookup API endpoints.

Provides endpoints for:
- GET /api/flights?query=<flight> - Track a single flight by number
- GET /api/flights?departure=&arrival=&date=&flightNumber= - Search flights
- GET /api/flights/<flight_number> - Track a single flight by number
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from flightlookup.errors import FlightLookupError
from flightlookup.models import SearchCriteria

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api/flights')


def _service():
    return current_app.config['LOOKUP_SERVICE']


@flights_bp.errorhandler(FlightLookupError)
def handle_lookup_error(e: FlightLookupError):
    """Translate lookup failures into JSON error responses."""
    if e.status_code >= 500:
        logger.error(f'Flight lookup failed: {e.message}')
    else:
        logger.debug(f'Flight lookup rejected ({e.status_code}): {e.message}')
    return jsonify(e.to_dict()), e.status_code


@flights_bp.route('', methods=['GET'])
def lookup_flights():
    """
    Search or track flights.

    Track mode (when "query" is given):
    - query: flight number, e.g. UA1. Blank returns an empty list.
    - 404 if no flight matches, otherwise a single-element list

    Search mode:
    - departure, arrival: airport IATA codes
    - date: YYYY-MM-DD
    - flightNumber (or flightIata): flight number
    - status: optional flight status filter
    - 400 if none of departure/arrival/date/flightNumber is given
    """
    if 'query' in request.args:
        flights = _service().track(request.args.get('query'))
        return jsonify([f.to_dict() for f in flights])

    criteria = SearchCriteria.from_args(request.args)
    result = _service().search(criteria)
    return jsonify(result.to_dict())


@flights_bp.route('/<flight_number>', methods=['GET'])
def track_flight(flight_number: str):
    """Track a single flight by number given in the path."""
    flights = _service().track(flight_number)
    return jsonify([f.to_dict() for f in flights])
