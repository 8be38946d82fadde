"""
Game Configuration Constants Module

Defines the fixed rules of the daily puzzle and loads the curated word list.
Everything here is part of the compatibility contract for persisted data:
changing EPOCH, the word list order, or WIN_TEXTS changes which word or
message every past and future day maps to.
"""

import json
import os
from datetime import date
from typing import List, Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every target word and guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per day.
Type: Final[int] - Immutable to prevent accidental modification
"""

EPOCH: Final[date] = date(1999, 12, 31)
"""
Local calendar date that maps to day number 0 (2000-01-01 is day 1).
Must never change once day numbers have been persisted.
"""

WIN_TEXTS: Final[List[str]] = [
    "Genius",
    "Magnificent",
    "Impressive",
    "Splendid",
    "Great",
    "Phew",
    "Nailed it",
    "Brilliant",
]
"""Celebration messages drawn deterministically per day on a win."""


def _load_word_list() -> List[str]:
    """
    Load word list from the words.json file next to this module.

    Returns:
        List[str]: List of lowercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If words.json is not found
        ValueError: If the JSON is malformed, empty, or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [str(word).strip().lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return lowercase_words


# Curated word database loaded from JSON file. Order is significant.
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    Checks that every word is exactly WORD_LENGTH alphabetic lowercase
    characters and that there are no duplicate entries.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(WORD_LIST) != len(set(WORD_LIST)):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Summarizes the word list (size, vowel density, letter frequency).

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_LIST)

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "avg_vowel_count": round(total_vowels / len(WORD_LIST), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
