"""
Testing the game state machine.
"""

import pytest

from gurdle.config import NUM_TRIES, WORD_SIZE
from gurdle.models.game import CharChoice, GameState, InvalidSecretError, Status
from gurdle.services.game_model import GameModel, REASON_GUESS_SUBMITTED, REASON_NEW_GAME


def test_new_game_resets_everything(model, type_word):
    type_word(model, "STOMP")
    model.confirm_guess()
    type_word(model, "AB")

    model.new_game("ALLOW")

    assert model.secret() == "ALLOW"
    assert model.num_attempts() == 0
    assert model.game_state() == GameState.ONGOING
    assert model.guess_buffer() == ""
    for row in range(NUM_TRIES):
        for col in range(WORD_SIZE):
            assert model.get(row, col) == CharChoice("", Status.UNSET)


def test_new_game_without_secret_draws_from_word_source(model, words):
    model.new_game()
    assert model.secret() in words


def test_new_game_upper_cases_secret(model):
    model.new_game("llama")
    assert model.secret() == "LLAMA"


def test_new_game_rejects_wrong_length_secret(model):
    with pytest.raises(InvalidSecretError) as excinfo:
        model.new_game("ABC")

    assert "(5)" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)
    assert model.secret() == "CRANE"


def test_fresh_model_is_playable(word_list):
    game = GameModel(word_list)
    assert len(game.secret()) == WORD_SIZE
    assert game.game_state() == GameState.ONGOING


def test_winning_first_guess(model, type_word):
    type_word(model, "CRANE")
    model.confirm_guess()

    assert model.game_state() == GameState.WON
    assert model.num_attempts() == 1
    assert all(model.get(0, col).status == Status.RIGHT_POSITION for col in range(WORD_SIZE))
    assert "".join(model.get(0, col).char for col in range(WORD_SIZE)) == "CRANE"


def test_six_wrong_guesses_lose(model, type_word):
    for attempt in range(1, NUM_TRIES + 1):
        type_word(model, "STOMP")
        model.confirm_guess()
        assert model.num_attempts() == attempt
        if attempt < NUM_TRIES:
            assert model.game_state() == GameState.ONGOING

    assert model.game_state() == GameState.LOST


def test_win_on_last_attempt_is_won(model, type_word):
    for _ in range(NUM_TRIES - 1):
        type_word(model, "STOMP")
        model.confirm_guess()
    type_word(model, "CRANE")
    model.confirm_guess()

    assert model.game_state() == GameState.WON
    assert model.num_attempts() == NUM_TRIES


def test_short_guess_is_illegal(model, type_word):
    type_word(model, "AB")
    model.confirm_guess()

    assert model.game_state() == GameState.ILLEGAL_WORD
    assert model.num_attempts() == 0
    assert model.guess_buffer() == ""
    assert model.get(0, 0) == CharChoice()


def test_unknown_word_is_illegal(model, type_word):
    type_word(model, "ZZZZZ")
    model.confirm_guess()

    assert model.game_state() == GameState.ILLEGAL_WORD
    assert model.num_attempts() == 0
    assert model.get(0, 0).status == Status.UNSET


def test_illegal_word_returns_to_ongoing_after_accepted_guess(model, type_word):
    type_word(model, "ZZZZZ")
    model.confirm_guess()
    type_word(model, "STOMP")
    assert model.game_state() == GameState.ILLEGAL_WORD

    model.confirm_guess()

    assert model.game_state() == GameState.ONGOING
    assert model.num_attempts() == 1


def test_attempts_increase_only_on_accepted_guesses(model):
    sequence = ["STOMP", "XX", "PLANT", "QQQQQ", "GHOST"]
    for word in sequence:
        before = model.num_attempts()
        model.submit_guess(word)
        accepted = model.game_state() != GameState.ILLEGAL_WORD
        assert model.num_attempts() == before + (1 if accepted else 0)
    assert model.num_attempts() == 3


def test_buffer_stops_at_word_size(model, type_word):
    type_word(model, "STOMPER")
    assert model.guess_buffer() == "STOMP"


def test_enter_guess_char_upper_cases(model, type_word):
    type_word(model, "stomp")
    model.confirm_guess()
    assert model.num_attempts() == 1
    assert model.get(0, 0).char == "S"


def test_enter_guess_char_requires_single_character(model):
    with pytest.raises(ValueError):
        model.enter_guess_char("AB")
    with pytest.raises(ValueError):
        model.enter_guess_char("")


def test_remove_guess_char(model, type_word):
    type_word(model, "STO")
    model.remove_guess_char()
    assert model.guess_buffer() == "ST"

    model.remove_guess_char()
    model.remove_guess_char()
    model.remove_guess_char()
    assert model.guess_buffer() == ""


def test_submit_guess_does_not_truncate(model):
    model.submit_guess("STOMPS")
    assert model.game_state() == GameState.ILLEGAL_WORD
    assert model.num_attempts() == 0


def test_submit_guess_replaces_buffer(model, type_word):
    type_word(model, "PLA")
    model.submit_guess("stomp")

    assert model.num_attempts() == 1
    assert model.guess_buffer() == ""
    assert model.get(0, 4).char == "P"


def test_duplicate_letters_in_grid(model):
    model.new_game("ALLOW")
    model.submit_guess("LLAMA")

    statuses = [model.get(0, col).status for col in range(WORD_SIZE)]
    assert statuses == [
        Status.WRONG_POSITION, Status.RIGHT_POSITION, Status.WRONG_POSITION,
        Status.ABSENT, Status.ABSENT,
    ]


@pytest.mark.parametrize("row,col", [
    (NUM_TRIES, 0), (0, WORD_SIZE), (-1, 0), (0, -1), (100, 100),
])
def test_get_out_of_range(model, row, col):
    with pytest.raises(IndexError):
        model.get(row, col)


def test_reads_are_idempotent(model):
    model.submit_guess("TRACE")
    first = (model.game_state(), model.num_attempts(), model.get(0, 1), model.secret())
    second = (model.game_state(), model.num_attempts(), model.get(0, 1), model.secret())
    assert first == second


@pytest.mark.parametrize("finishing_guesses,state", [
    (["CRANE"], GameState.WON),
    (["STOMP"] * NUM_TRIES, GameState.LOST),
])
def test_finished_game_ignores_input(model, type_word, finishing_guesses, state):
    for word in finishing_guesses:
        model.submit_guess(word)
    assert model.game_state() == state

    grid = [[model.get(r, c) for c in range(WORD_SIZE)] for r in range(NUM_TRIES)]
    attempts = model.num_attempts()

    type_word(model, "PLANT")
    model.remove_guess_char()
    model.confirm_guess()
    model.submit_guess("GHOST")

    assert model.game_state() == state
    assert model.num_attempts() == attempts
    assert model.guess_buffer() == ""
    assert [[model.get(r, c) for c in range(WORD_SIZE)] for r in range(NUM_TRIES)] == grid


def test_secret_always_available(model):
    assert model.secret() == "CRANE"
    model.submit_guess("CRANE")
    assert model.secret() == "CRANE"


def test_notifications(model, type_word):
    received = []
    model.add_observer(lambda game, reason: received.append((game, reason, game.game_state())))

    type_word(model, "STOMP")
    assert received == []

    model.confirm_guess()
    model.submit_guess("AB")
    model.new_game("ALLOW")

    assert [reason for _, reason, _ in received] == [
        REASON_GUESS_SUBMITTED, REASON_GUESS_SUBMITTED, REASON_NEW_GAME
    ]
    assert all(game is model for game, _, _ in received)
    # Observers see the state after the change
    assert received[1][2] == GameState.ILLEGAL_WORD


def test_no_notification_for_ignored_confirm(model):
    model.submit_guess("CRANE")
    received = []
    model.add_observer(lambda game, reason: received.append(reason))

    model.confirm_guess()

    assert received == []


def test_remove_observer(model):
    received = []

    def observer(game, reason):
        received.append(reason)

    model.add_observer(observer)
    assert model.remove_observer(observer) is True
    model.new_game()

    assert received == []
    assert model.remove_observer(observer) is False


def test_letter_statuses_derived_from_grid(model):
    assert set(model.letter_statuses().values()) == {Status.UNSET}

    model.submit_guess("TRACE")
    model.submit_guess("SCOOP")

    statuses = model.letter_statuses()
    assert statuses["R"] == Status.RIGHT_POSITION
    assert statuses["C"] == Status.WRONG_POSITION
    assert statuses["T"] == Status.ABSENT
    assert statuses["O"] == Status.ABSENT
    assert statuses["Z"] == Status.UNSET

    model.submit_guess("CRANE")
    assert model.letter_statuses()["C"] == Status.RIGHT_POSITION


def test_snapshot_hides_secret_until_game_over(model):
    snapshot = model.snapshot()
    assert snapshot.secret is None
    assert snapshot.game_state == "ONGOING"
    assert snapshot.max_attempts == NUM_TRIES
    assert snapshot.word_size == WORD_SIZE
    assert model.snapshot(reveal=True).secret == "CRANE"

    model.submit_guess("CRANE")
    snapshot = model.snapshot()
    assert snapshot.secret == "CRANE"
    assert snapshot.grid[0][0] == ("C", "RIGHT_POSITION")
    assert snapshot.grid[1][0] == ("", "UNSET")
