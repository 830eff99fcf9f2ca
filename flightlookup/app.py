"""
Flight lookup Flask application.

Main entry point for the web application. Initializes:
- AviationStack client and lookup service
- API routes

Usage:
    python -m flightlookup.app

Or with gunicorn:
    gunicorn 'flightlookup.app:create_app()'
"""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from flightlookup.api import flights_bp, status_bp
from flightlookup.config import AppConfig, config
from flightlookup.services import AviationStackClient, FlightLookupService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(
    app_config: Optional[AppConfig] = None,
    lookup_service: Optional[FlightLookupService] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        app_config: Configuration to use. Defaults to the environment.
        lookup_service: Service to answer lookups with. Defaults to one
                        backed by a real AviationStack client. Inject a
                        fake here for testing.

    Returns:
        Configured Flask application instance.
    """
    app_config = app_config or config

    app = Flask(__name__)
    app.config['SECRET_KEY'] = app_config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    if lookup_service is None:
        if not app_config.aviationstack.is_configured:
            logger.warning('AVIATIONSTACK_API_KEY is not set. Flight lookups will return errors.')
        client = AviationStackClient.from_config(app_config.aviationstack)
        lookup_service = FlightLookupService(client)

    app.config['LOOKUP_SERVICE'] = lookup_service

    # Register API blueprints
    app.register_blueprint(flights_bp)
    app.register_blueprint(status_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting flight lookup on http://localhost:{port}')
    logger.info(f'Search: http://localhost:{port}/api/flights?departure=JFK&arrival=LAX')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
