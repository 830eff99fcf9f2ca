"""
Status API endpoint.

Provides endpoints for:
- GET /api/status - Upstream configuration and client usage counters
"""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

status_bp = Blueprint('status', __name__, url_prefix='/api/status')


@status_bp.route('', methods=['GET'])
def get_status():
    """
    Get service status.

    Never calls upstream; reports whether a credential is configured and
    how many upstream requests this process has made.
    """
    client = current_app.config['LOOKUP_SERVICE'].client
    stats = client.stats

    return jsonify({
        'upstream': {
            'configured': stats['api_configured'],
            'base_url': client.base_url,
        },
        'client': {
            'requests': stats['requests'],
            'failures': stats['failures'],
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })
