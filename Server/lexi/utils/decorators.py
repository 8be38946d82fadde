"""
Request Decorators

Contains decorators that hand engine components to HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from .helpers import get_engine


def require_engine(*components):
    """
    Inject engine components (e.g. 'puzzle', 'stats') as keyword arguments.
    Answers 500 when the app was created without an engine.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            engine = get_engine()
            if not engine:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            for name in components:
                kwargs[name] = engine[name]
            return f(*args, **kwargs)

        return decorated_function
    return decorator


def websocket_payload_required(f):
    """Decorator for WebSocket handlers that expect a JSON object payload."""
    @wraps(f)
    def decorated_function(data=None, *args, **kwargs):
        if data is None:
            data = {}
        if not isinstance(data, dict):
            emit('error', {'error': 'Payload must be a JSON object'})
            return
        return f(data, *args, **kwargs)

    return decorated_function
