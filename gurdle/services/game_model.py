"""
Game Model

Contains the state machine for a single Wordle game: secret word, attempt
counter, attempt grid, in-progress guess buffer and lifecycle state.
"""

import string
from typing import Dict, List, Optional

from ..config.game_settings import WORD_SIZE, NUM_TRIES
from ..models.game import CharChoice, GameSnapshot, GameState, InvalidSecretError, Status
from .evaluator import evaluate_guess
from .notifier import ChangeNotifier, Observer
from .word_source import WordSource

REASON_NEW_GAME = "new game"
REASON_GUESS_SUBMITTED = "guess submitted"

# Higher wins when several rows disagree about a letter
_STATUS_PRIORITY = {
    Status.UNSET: 0,
    Status.ABSENT: 1,
    Status.WRONG_POSITION: 2,
    Status.RIGHT_POSITION: 3,
}


class GameModel:
    """
    One player's Wordle game.

    This class handles:
    - Secret word selection through a word source
    - Character-by-character guess entry
    - Guess validation and evaluation
    - Lifecycle transitions (ongoing, illegal word, won, lost)
    - Notifying observers after every state change

    The model is not thread-safe; callers sharing one instance across
    threads must serialize access themselves.
    """

    WORD_SIZE = WORD_SIZE
    NUM_TRIES = NUM_TRIES

    def __init__(self, word_source: WordSource):
        self._word_source = word_source
        self._notifier = ChangeNotifier()
        self._secret = ""
        self._attempts = 0
        self._state = GameState.ONGOING
        self._buffer: List[str] = []
        self._grid: List[List[CharChoice]] = []
        self._reset(word_source.pick_secret().upper())

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: Observer) -> None:
        """Register ``observer(model, reason)`` for change notifications."""
        self._notifier.add_observer(observer)

    def remove_observer(self, observer: Observer) -> bool:
        return self._notifier.remove_observer(observer)

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    def new_game(self, secret: Optional[str] = None) -> None:
        """
        Starts a fresh game.

        Args:
            secret: Secret word to use; drawn from the word source if omitted

        Raises:
            InvalidSecretError: If ``secret`` is not WORD_SIZE characters long
        """
        if secret is None:
            secret = self._word_source.pick_secret()
        elif len(secret) != WORD_SIZE:
            raise InvalidSecretError(secret, WORD_SIZE)

        self._reset(secret.upper())
        self._notifier.notify(self, REASON_NEW_GAME)

    def enter_guess_char(self, ch: str) -> None:
        """Append one character to the guess buffer if there is room."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")

        if self._state.is_terminal or len(self._buffer) >= WORD_SIZE:
            return
        self._buffer.append(ch.upper())

    def remove_guess_char(self) -> None:
        """Drop the last character of the guess buffer (backspace)."""
        if self._state.is_terminal or not self._buffer:
            return
        self._buffer.pop()

    def confirm_guess(self) -> None:
        """Submit the current guess buffer."""
        if self._state.is_terminal:
            return
        self._submit("".join(self._buffer))

    def submit_guess(self, word: str) -> None:
        """
        Submit a whole word, replacing whatever is in the guess buffer.

        A word of the wrong length is rejected exactly like an incomplete
        buffer; it is never truncated.
        """
        if self._state.is_terminal:
            return
        self._submit(word.upper())

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> CharChoice:
        """
        Returns the letter cell at ``(row, col)``.

        Raises:
            IndexError: If the position lies outside the attempt grid
        """
        if not (0 <= row < NUM_TRIES and 0 <= col < WORD_SIZE):
            raise IndexError(
                f"Grid position ({row}, {col}) out of range "
                f"({NUM_TRIES} rows x {WORD_SIZE} columns)"
            )
        return self._grid[row][col]

    def game_state(self) -> GameState:
        return self._state

    def num_attempts(self) -> int:
        return self._attempts

    def secret(self) -> str:
        return self._secret

    def guess_buffer(self) -> str:
        return "".join(self._buffer)

    def is_game_over(self) -> bool:
        return self._state.is_terminal

    def letter_statuses(self) -> Dict[str, Status]:
        """
        Best status seen for every letter across the submitted rows.

        Letters that were never guessed stay UNSET. This is the keyboard
        colouring, always derived from the grid.
        """
        statuses = {letter: Status.UNSET for letter in string.ascii_uppercase}
        for row in self._grid[:self._attempts]:
            for cell in row:
                current = statuses.get(cell.char, Status.UNSET)
                if _STATUS_PRIORITY[cell.status] > _STATUS_PRIORITY[current]:
                    statuses[cell.char] = cell.status
        return statuses

    def snapshot(self, reveal: bool = False) -> GameSnapshot:
        """
        Returns a JSON-ready view of the game.

        The secret is only included once the game is over, or when
        ``reveal`` is set.
        """
        return GameSnapshot(
            game_state=self._state.value,
            num_attempts=self._attempts,
            max_attempts=NUM_TRIES,
            word_size=WORD_SIZE,
            guess_buffer=self.guess_buffer(),
            grid=[[(cell.char, cell.status.value) for cell in row] for row in self._grid],
            letter_status={letter: status.value for letter, status in self.letter_statuses().items()},
            secret=self._secret if (reveal or self.is_game_over()) else None,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset(self, secret: str) -> None:
        self._secret = secret
        self._attempts = 0
        self._state = GameState.ONGOING
        self._buffer = []
        self._grid = [[CharChoice() for _ in range(WORD_SIZE)] for _ in range(NUM_TRIES)]

    def _submit(self, word: str) -> None:
        self._buffer = []

        if len(word) != WORD_SIZE or not self._word_source.is_legal(word):
            self._state = GameState.ILLEGAL_WORD
        else:
            statuses = evaluate_guess(self._secret, word)
            self._grid[self._attempts] = [
                CharChoice(letter, status) for letter, status in zip(word, statuses)
            ]
            self._attempts += 1

            if all(status == Status.RIGHT_POSITION for status in statuses):
                self._state = GameState.WON
            elif self._attempts == NUM_TRIES:
                self._state = GameState.LOST
            else:
                self._state = GameState.ONGOING

        self._notifier.notify(self, REASON_GUESS_SUBMITTED)
