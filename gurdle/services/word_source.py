"""
Word Source

The legal-word collaborator of the game model: answers "is this a legal
guess?" and picks secret words.
"""

import random
from typing import Iterable, List, Optional, Protocol

from ..config.game_settings import WORD_SIZE, load_word_list, validate_word_list_integrity


class WordSource(Protocol):
    """Capability the game model needs from a dictionary."""

    def is_legal(self, word: str) -> bool:
        ...

    def pick_secret(self) -> str:
        ...


class WordList:
    """
    In-memory word source backed by a list of WORD_SIZE-letter words.

    Lookups are case-insensitive; all words are stored upper case.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self.words: List[str] = [word.upper() for word in words]
        validate_word_list_integrity(self.words)
        self._lookup = set(self.words)
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Optional[str] = None, rng: Optional[random.Random] = None) -> "WordList":
        """Load a word list from a JSON file (the bundled list by default)."""
        return cls(load_word_list(path), rng=rng)

    def is_legal(self, word: str) -> bool:
        return len(word) == WORD_SIZE and word.upper() in self._lookup

    def pick_secret(self) -> str:
        return self._rng.choice(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return self.is_legal(word)
