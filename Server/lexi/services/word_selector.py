"""
Daily Word Selector

Deterministically maps a day number to the day's target word.

Selection contract (never change it, every past day's word depends on it):
seed the ARC4 `seedrandom` port with str(day_number), draw one float f in
[0, 1), and take the word at index floor(f * len(word_bank)).
"""

import math
from typing import Dict, List, Optional

from ..config.game_settings import WIN_TEXTS
from ..utils.seedrandom import seed_random
from .word_bank import WordBank


class DailyWordSelector:
    """
    Picks the target word for a day.

    Results are memoized per day number; the memo is only a shortcut and
    never decides anything on its own.
    """

    def __init__(self, word_bank: WordBank, win_texts: Optional[List[str]] = None):
        self.word_bank = word_bank
        self.win_texts = list(win_texts if win_texts is not None else WIN_TEXTS)
        self._index_memo: Dict[int, int] = {}

    @staticmethod
    def _draw(day_number: int, size: int) -> int:
        rng = seed_random(str(day_number))
        return math.floor(rng() * size)

    def index_for_day(self, day_number: int) -> int:
        """Word bank index of the day's target word."""
        index = self._index_memo.get(day_number)
        if index is None:
            index = self._draw(day_number, len(self.word_bank))
            self._index_memo[day_number] = index
        return index

    def word_for_day(self, day_number: int) -> str:
        return self.word_bank.word_at(self.index_for_day(day_number))

    def win_celebration_text(self, day_number: int) -> str:
        """Celebration message for a win on this day, drawn with its own generator."""
        if not self.win_texts:
            return ""
        return self.win_texts[self._draw(day_number, len(self.win_texts))]


def select_word_for_day(day_number: int, word_bank: Optional[WordBank] = None) -> str:
    """Read-only shortcut: the target word for day_number from the given (or bundled) bank."""
    return DailyWordSelector(word_bank or WordBank.default()).word_for_day(day_number)
