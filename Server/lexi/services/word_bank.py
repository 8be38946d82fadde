"""
Word Bank

Immutable, ordered word list used both as the pool of target words and as
the dictionary of acceptable guesses. Positional indexes are stable because
daily selection depends on them.
"""

from typing import Iterable, Iterator, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, WORD_LIST
from ..exceptions import IndexOutOfRange


class WordBank:
    """Ordered collection of unique WORD_LENGTH-letter lowercase words."""

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH):
        normalized = tuple(word.strip().lower() for word in words)

        for index, word in enumerate(normalized):
            if len(word) != word_length or not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' is not a {word_length}-letter word")

        if len(set(normalized)) != len(normalized):
            duplicates = sorted({word for word in normalized if normalized.count(word) > 1})
            raise ValueError(f"Duplicate words found in word list: {duplicates}")

        if not normalized:
            raise ValueError("Word list cannot be empty")

        self.word_length = word_length
        self._words: Tuple[str, ...] = normalized
        self._lookup = frozenset(normalized)

    @classmethod
    def default(cls) -> "WordBank":
        """Word bank built from the bundled words.json."""
        return cls(WORD_LIST)

    def contains(self, word: Optional[str]) -> bool:
        """Case-insensitive membership test."""
        if not word:
            return False
        return word.strip().lower() in self._lookup

    def word_at(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise IndexOutOfRange(index, len(self._words))
        return self._words[index]

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    @property
    def length(self) -> int:
        return len(self._words)
