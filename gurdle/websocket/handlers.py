"""
WebSocket Event Handlers

Handles the real-time front end: letter entry, guess submission and new
games over Socket.IO, plus a broadcast of every game change to all
connected clients.
"""

from flask import request
from flask_socketio import emit
from ..models.game import GameState, InvalidSecretError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import game_payload


def register_websocket_handlers(socketio, model):
    """Register all WebSocket event handlers and the broadcasting observer."""

    def broadcast_change(changed_model, reason):
        """Push every model notification to all connected clients."""
        socketio.emit('game_update', {
            'reason': reason,
            'state': game_payload(changed_model)
        })

    model.add_observer(broadcast_change)

    @socketio.on('connect')
    @websocket_game_required
    def handle_connect(auth=None, model=None):
        """Send the current game to a newly connected client."""
        emit('game_update', {
            'reason': 'connected',
            'state': game_payload(model)
        })

    @socketio.on('enter_letter')
    @websocket_game_required
    def handle_enter_letter(data=None, model=None):
        """Append a letter; only the sender is told about buffer changes."""
        letter = data.get('letter') if isinstance(data, dict) else None
        if not isinstance(letter, str) or len(letter) != 1:
            emit('error', {'error': 'A single letter is required'})
            return

        game_logger.log_user_action(request, 'ws_enter_letter', letter=letter)
        model.enter_guess_char(letter)
        emit('buffer_update', {'guess_buffer': model.guess_buffer()})

    @socketio.on('remove_letter')
    @websocket_game_required
    def handle_remove_letter(data=None, model=None):
        game_logger.log_user_action(request, 'ws_remove_letter')
        model.remove_guess_char()
        emit('buffer_update', {'guess_buffer': model.guess_buffer()})

    @socketio.on('confirm_guess')
    @websocket_game_required
    def handle_confirm_guess(data=None, model=None):
        """Submit the buffered guess; the result arrives as a game_update."""
        submitted = model.guess_buffer()
        attempts_before = model.num_attempts()

        game_logger.log_user_action(request, 'ws_confirm_guess', guess=submitted)
        model.confirm_guess()

        if model.num_attempts() == attempts_before:
            return

        if model.game_state() == GameState.WON:
            game_logger.log_game_event(
                'game_won', request.remote_addr or 'unknown',
                rounds_used=model.num_attempts(), secret=model.secret(),
                winning_guess=submitted
            )
        elif model.game_state() == GameState.LOST:
            game_logger.log_game_event(
                'game_lost', request.remote_addr or 'unknown',
                rounds_used=model.num_attempts(), secret=model.secret(),
                final_guess=submitted
            )

    @socketio.on('new_game')
    @websocket_game_required
    def handle_new_game(data=None, model=None):
        secret = data.get('secret') if isinstance(data, dict) else None
        if secret is not None and not isinstance(secret, str):
            emit('error', {'error': 'Secret must be a string'})
            return

        game_logger.log_user_action(request, 'ws_new_game', chosen_secret=secret is not None)
        try:
            model.new_game(secret)
        except InvalidSecretError as e:
            game_logger.log_error(request, e, 'ws_new_game')
            emit('error', {'error': str(e)})
