"""
API module for the flight lookup service.

Provides REST endpoints for:
- Flight search and tracking
- Service status
"""

from flightlookup.api.flights import flights_bp
from flightlookup.api.status import status_bp

__all__ = ['flights_bp', 'status_bp']
