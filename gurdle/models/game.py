"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Status(Enum):
    """Evaluation status of a single letter cell."""
    UNSET = "UNSET"
    RIGHT_POSITION = "RIGHT_POSITION"
    WRONG_POSITION = "WRONG_POSITION"
    ABSENT = "ABSENT"


class GameState(Enum):
    """Coarse lifecycle phase of one game."""
    ONGOING = "ONGOING"
    ILLEGAL_WORD = "ILLEGAL_WORD"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


class InvalidSecretError(ValueError):
    """Raised when a secret word of the wrong length is supplied."""

    def __init__(self, word: str, word_size: int):
        super().__init__(f'"{word}" is not the required word length ({word_size}).')
        self.word = word
        self.word_size = word_size


@dataclass(frozen=True)
class CharChoice:
    """One grid position: the guessed character and its evaluated status."""
    char: str = ""
    status: Status = Status.UNSET


@dataclass
class GameSnapshot:
    """JSON-ready view of a game for presentation layers."""
    game_state: str
    num_attempts: int
    max_attempts: int
    word_size: int
    guess_buffer: str
    grid: List[List[Tuple[str, str]]]  # Status as string for JSON serialization
    letter_status: Dict[str, str] = field(default_factory=dict)
    secret: Optional[str] = None  # Only included when game is over or revealed
