"""
Testing the structured game logger.
"""

import sys
from datetime import datetime

import pytest

from gurdle.utils.game_logger import GameLogger, game_logger


@pytest.fixture(autouse=True)
def restore_shared_logger():
    # GameLogger instances share the "gurdle" logging.Logger
    yield
    game_logger.logger = game_logger._setup_logger()


def test_stats_read_the_file_being_written(tmp_path):
    logger = GameLogger(str(tmp_path), 'INFO')
    logger.log_game_event('game_won', 'console', rounds_used=3)
    logger.log_user_action(None, 'new_game')
    for handler in logger.logger.handlers:
        handler.flush()

    stats = logger.get_log_stats()

    assert stats['log_file'] == str(logger.log_file)
    assert stats['game_events'] == 1
    assert stats['user_actions'] == 1


def test_log_file_fixed_at_setup(tmp_path, monkeypatch):
    logger = GameLogger(str(tmp_path), 'INFO')
    opened = logger.log_file

    class NextDay(datetime):
        @classmethod
        def now(cls, tz=None):
            return datetime(2099, 1, 2, 0, 0, 1)

    monkeypatch.setattr(sys.modules['gurdle.utils.game_logger'], 'datetime', NextDay)

    assert logger.log_file == opened
    assert 'error' not in logger.get_log_stats()
