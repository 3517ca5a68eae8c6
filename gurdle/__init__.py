"""
Gurdle Application Package

A Wordle-style word-guessing game: a self-contained game engine plus thin
HTTP/WebSocket and terminal front ends that observe it.
"""

import threading

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, model=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        model: Game model to serve; one is built from the configured
            word list when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .services.game_model import GameModel
    from .services.word_source import WordList

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    if model is None:
        model = GameModel(WordList.from_file(app.config.get('WORD_LIST_PATH')))

    # One game per app, shared by every client
    app.game_model = model
    app.game_lock = threading.RLock()

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, model)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
