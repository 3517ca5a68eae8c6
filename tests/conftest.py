import os
import random
import tempfile

# Keep test logs out of the working tree; must run before gurdle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='gurdle-logs-'))

import pytest

from gurdle import create_app
from gurdle.config import TestingConfig
from gurdle.services.game_model import GameModel
from gurdle.services.word_source import WordList

WORDS = [
    "CRANE", "STOMP", "ALLOW", "LLAMA", "SPEED", "ABIDE", "EERIE", "LEVEL",
    "BELLE", "SCOOP", "COOLS", "RAISE", "STARE", "TRACE", "PLANT", "GHOST",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def word_list(words):
    return WordList(words, rng=random.Random(1234))


@pytest.fixture
def model(word_list):
    game = GameModel(word_list)
    game.new_game("CRANE")
    return game


@pytest.fixture
def app(model):
    app, socketio = create_app(TestingConfig, model=model)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    socket_client = app.socketio.test_client(app)
    yield socket_client
    if socket_client.is_connected():
        socket_client.disconnect()


@pytest.fixture
def type_word():
    def _type_word(game, word):
        for letter in word:
            game.enter_guess_char(letter)
    return _type_word
