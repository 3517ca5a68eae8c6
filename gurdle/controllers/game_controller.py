"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.game import GameState, InvalidSecretError
from ..utils.decorators import require_game_model
from ..utils.game_logger import game_logger
from ..utils.helpers import game_payload

game_bp = Blueprint('game', __name__)


def _log_game_end(model, last_guess):
    """Record a win or loss once the submitted guess finished the game."""
    if model.game_state() == GameState.WON:
        game_logger.log_game_event(
            'game_won', request.remote_addr,
            rounds_used=model.num_attempts(), secret=model.secret(),
            winning_guess=last_guess
        )
    elif model.game_state() == GameState.LOST:
        game_logger.log_game_event(
            'game_lost', request.remote_addr,
            rounds_used=model.num_attempts(), secret=model.secret(),
            final_guess=last_guess
        )


def _error(action, message, status):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status


@game_bp.route('/new_game', methods=['POST'])
@require_game_model
def new_game(model):
    """Start a new game, optionally with a chosen secret word."""
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _error('new_game', 'Request body must be a JSON object', 400)

        secret = data.get('secret')
        if secret is not None and not isinstance(secret, str):
            return _error('new_game', 'Secret must be a string', 400)

        game_logger.log_user_action(request, 'new_game', chosen_secret=secret is not None)

        try:
            model.new_game(secret)
        except InvalidSecretError as e:
            return _error('new_game', str(e), 400)

        response_data = {
            'success': True,
            'state': game_payload(model)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/state', methods=['GET'])
@require_game_model
def get_state(model):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state')

        response_data = {
            'success': True,
            'state': game_payload(model)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data,
            num_attempts=model.num_attempts(), game_state=model.game_state().value
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        return _error('get_state', str(e), 500)


@game_bp.route('/letter', methods=['POST'])
@require_game_model
def enter_letter(model):
    """Append one letter to the guess buffer."""
    try:
        data = request.get_json(silent=True)
        letter = data.get('letter') if isinstance(data, dict) else None
        if not isinstance(letter, str) or len(letter) != 1:
            return _error('enter_letter', 'A single letter is required', 400)

        game_logger.log_user_action(request, 'enter_letter', letter=letter)
        model.enter_guess_char(letter)

        response_data = {
            'success': True,
            'state': game_payload(model)
        }
        game_logger.log_server_response(request, 'enter_letter', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'enter_letter')
        return _error('enter_letter', str(e), 500)


@game_bp.route('/letter', methods=['DELETE'])
@require_game_model
def remove_letter(model):
    """Remove the last letter of the guess buffer."""
    try:
        game_logger.log_user_action(request, 'remove_letter')
        model.remove_guess_char()

        response_data = {
            'success': True,
            'state': game_payload(model)
        }
        game_logger.log_server_response(request, 'remove_letter', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'remove_letter')
        return _error('remove_letter', str(e), 500)


@game_bp.route('/guess', methods=['POST'])
@require_game_model
def make_guess(model):
    """Submit a whole guess, or the letters entered so far."""
    try:
        data = request.get_json(silent=True) or {}
        guess = data.get('guess') if isinstance(data, dict) else None

        if guess is not None and not isinstance(guess, str):
            return _error('submit_guess', 'Guess must be a string', 400)

        submitted = guess.strip().upper() if guess is not None else model.guess_buffer()
        attempts_before = model.num_attempts()

        game_logger.log_user_action(
            request, 'submit_guess',
            guess=submitted, guess_length=len(submitted)
        )

        if guess is not None:
            model.submit_guess(submitted)
        else:
            model.confirm_guess()

        accepted = model.num_attempts() > attempts_before
        response_data = {
            'success': True,
            'accepted': accepted,
            'state': game_payload(model)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            guess=submitted, accepted=accepted, game_state=model.game_state().value
        )

        if accepted:
            _log_game_end(model, submitted)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        return _error('submit_guess', str(e), 500)


@game_bp.route('/secret', methods=['GET'])
@require_game_model
def reveal_secret(model):
    """Reveal the secret word (cheat)."""
    try:
        game_logger.log_user_action(request, 'reveal_secret')
        game_logger.log_game_event(
            'word_revealed', request.remote_addr,
            num_attempts=model.num_attempts(), game_state=model.game_state().value
        )

        return jsonify({
            'success': True,
            'secret': model.secret()
        })

    except Exception as e:
        game_logger.log_error(request, e, 'reveal_secret')
        return _error('reveal_secret', str(e), 500)


@game_bp.route('/health', methods=['GET'])
@require_game_model
def health_check(model):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_state': model.game_state().value,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
