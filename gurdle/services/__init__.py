"""
Services Package

Contains the game engine: model, evaluator, notifier and word source.
"""

from .evaluator import evaluate_guess
from .game_model import GameModel, REASON_NEW_GAME, REASON_GUESS_SUBMITTED
from .notifier import ChangeNotifier
from .word_source import WordList, WordSource

__all__ = [
    'evaluate_guess',
    'GameModel', 'REASON_NEW_GAME', 'REASON_GUESS_SUBMITTED',
    'ChangeNotifier',
    'WordList', 'WordSource'
]
