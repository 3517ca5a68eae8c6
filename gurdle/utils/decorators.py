"""
Game Access Decorators

Contains decorators that hand the application's game model to HTTP and
WebSocket handlers while holding the game lock.
"""

from functools import wraps
from flask import jsonify, current_app
from flask_socketio import emit


def require_game_model(f):
    """
    Decorator injecting the app's game model into an HTTP endpoint as ``model``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        model = getattr(current_app, 'game_model', None)
        if model is None:
            return jsonify({
                'success': False,
                'error': 'Game model unavailable'
            }), 500

        # The model is not thread-safe
        with current_app.game_lock:
            kwargs['model'] = model
            return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator injecting the app's game model into a WebSocket handler."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        model = getattr(current_app, 'game_model', None)
        if model is None:
            emit('error', {'error': 'Game model unavailable'})
            return

        with current_app.game_lock:
            kwargs['model'] = model
            return f(*args, **kwargs)

    return decorated_function
