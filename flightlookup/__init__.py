"""
Flight Lookup Backend Package.

Flight status lookups over the AviationStack API, served with Flask.

Modules:
    api/         REST endpoints for flight search/tracking and service status
    models/      Frozen value records (upstream, display, search criteria)
    services/    AviationStack client, response normalizer, lookup service
    config.py    Centralized configuration from environment variables
    errors.py    Typed lookup failures mapped to HTTP status codes
"""

__version__ = '1.0.0'
