"""
Health check endpoint for monitoring.

The guidance engine has no external dependencies, so liveness is the only
check: if the process answers, it can classify.
"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify


health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health_check():
    """Lightweight health check for load balancer probes."""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': 'deedguide',
    }), 200
