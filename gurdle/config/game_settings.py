"""
Game Configuration Constants Module

This module defines the game rule constants and the loading/validation of
the word list that backs the legal-word source. The two constants form the
external contract of the engine and must not be changed at runtime.
"""

import json
import os
from typing import List, Final, Optional

# Core Game Configuration Constants
WORD_SIZE: Final[int] = 5
"""
Length of the secret word and of every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

NUM_TRIES: Final[int] = 6
"""
Maximum number of accepted guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words; the bundled
            words.json is used when omitted

    Returns:
        List[str]: List of uppercase WORD_SIZE-letter words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or
            contains invalid words
    """
    if json_file_path is None:
        json_file_path = DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    # Convert all words to uppercase and validate
    uppercase_words = [str(word).upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)

    return uppercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_SIZE characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_SIZE:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_SIZE} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        seen = set()
        duplicates = sorted({word for word in words if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: The five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":
    try:
        bundled = load_word_list()
        print(" Word list validation passed")
        print(f" Word statistics: {get_word_statistics(bundled)}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
