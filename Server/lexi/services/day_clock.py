"""
Day Clock

Maps calendar dates to day numbers (days since EPOCH) and back.
"Same day" is always judged in the local time zone.
"""

from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

from ..config.game_settings import EPOCH


class DayClock:
    """
    Converts dates to and from integer day numbers.

    Args:
        now: Callable returning the current datetime; defaults to local now.
            Hosts and tests inject a fixed clock here.
        epoch: Date mapped to day number 0.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None, epoch: date = EPOCH):
        self._now = now or datetime.now
        self.epoch = epoch

    @staticmethod
    def _to_local_date(value: Union[date, datetime]) -> date:
        if isinstance(value, datetime):
            # Aware timestamps are converted to local time; naive ones are already local
            if value.tzinfo is not None:
                return value.astimezone().date()
            return value.date()
        return value

    def day_number_of(self, value: Union[date, datetime]) -> int:
        """Days between EPOCH and the local calendar day of value."""
        return (self._to_local_date(value) - self.epoch).days

    def date_of(self, day_number: int) -> date:
        """Inverse of day_number_of, for display."""
        return self.epoch + timedelta(days=day_number)

    def today(self) -> date:
        return self._to_local_date(self._now())

    def today_number(self) -> int:
        return self.day_number_of(self._now())
