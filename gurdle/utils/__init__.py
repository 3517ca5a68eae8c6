"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_model, websocket_game_required
from .helpers import get_user_identity, game_payload
from .game_logger import game_logger, GameLogger

__all__ = [
    'require_game_model', 'websocket_game_required',
    'get_user_identity', 'game_payload',
    'game_logger', 'GameLogger'
]
