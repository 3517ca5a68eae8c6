"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm with correct handling of
repeated letters.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import Status


def evaluate_guess(secret: str, guess: str) -> List[Status]:
    """
    Classifies every letter of ``guess`` against ``secret``.

    Exact matches are marked first and consume their letter from a
    remaining-count pool built from the secret. Every other position is
    then WRONG_POSITION while the pool still holds its letter, ABSENT
    otherwise. A letter is therefore never reported more often than it
    occurs in the secret.

    Args:
        secret: The hidden word
        guess: The submitted word, same length as ``secret``

    Returns:
        List[Status]: One status per position of ``guess``

    Raises:
        ValueError: If the words differ in length
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match secret length {len(secret)}"
        )

    result: List[Optional[Status]] = [None] * len(guess)
    remaining = Counter(secret)

    # First pass: exact position matches
    for i, (letter, target) in enumerate(zip(guess, secret)):
        if letter == target:
            result[i] = Status.RIGHT_POSITION
            remaining[letter] -= 1

    # Second pass: misplaced letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = Status.WRONG_POSITION
            remaining[letter] -= 1
        else:
            result[i] = Status.ABSENT

    return result  # type: ignore[return-value]
