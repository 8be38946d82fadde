"""
Share Text

Builds the spoiler-free result block players paste elsewhere.
"""

from datetime import date
from typing import Iterable, Optional

from ..config.game_settings import MAX_ATTEMPTS
from .day_clock import DayClock
from .guess_evaluator import evaluate, status_row


def format_day(value: date) -> str:
    """Human-readable day, e.g. 'Oct 19, 2026'."""
    return f"{value:%b} {value.day}, {value.year}"


def build_share_text(day_number: int,
                     guesses: Iterable[str],
                     target: str,
                     decoration: str,
                     clock: Optional[DayClock] = None) -> str:
    """
    Header line '<decoration> <formatted day> <n>/6' followed by one row of
    status squares per guess.
    """
    clock = clock or DayClock()
    guesses = list(guesses)
    header = f"{decoration} {format_day(clock.date_of(day_number))} {len(guesses)}/{MAX_ATTEMPTS}"
    rows = [status_row(evaluate(guess, target)) for guess in guesses]
    return "\n".join([header] + rows)
