"""
External integration and lookup services.

Handles the AviationStack API call, response normalization and the
search/track lookup modes built on top of them.
"""

from flightlookup.services.aviationstack import AviationStackClient
from flightlookup.services.flight_lookup import FlightLookupService, SearchResult
from flightlookup.services.normalizer import normalize, normalize_all

__all__ = [
    'AviationStackClient',
    'FlightLookupService',
    'SearchResult',
    'normalize',
    'normalize_all',
]
