"""
History Service

Month overview for the calendar view: which days were won, lost, started
or never opened.
"""

import calendar
from datetime import date
from typing import Dict, List

from ..exceptions import StorageError
from ..utils.game_logger import game_logger
from .day_clock import DayClock
from .persistence import PersistenceGateway


def day_status(gateway: PersistenceGateway, day_number: int, today_number: int) -> str:
    """One of 'future', 'not_started', 'in_progress', 'won', 'lost'."""
    if day_number > today_number:
        return "future"
    try:
        session = gateway.get_session(day_number)
    except StorageError as e:
        game_logger.log_error(None, e, 'calendar_day_status', day_number)
        return "not_started"
    if session is None or not session.guesses:
        return "not_started"
    if not session.game_over:
        return "in_progress"
    return "won" if session.has_won else "lost"


def month_overview(gateway: PersistenceGateway, clock: DayClock, year: int, month: int) -> List[Dict]:
    """
    Status of every day in a calendar month.

    Raises:
        ValueError: If month is not 1..12 or the year is out of range
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")

    today_number = clock.today_number()
    _, days_in_month = calendar.monthrange(year, month)

    days = []
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        day_number = clock.day_number_of(current)
        days.append({
            "date": current.isoformat(),
            "day_number": day_number,
            "is_today": day_number == today_number,
            "status": day_status(gateway, day_number, today_number),
        })
    return days
