"""
Stats Service

Folds completed days into the lifetime statistics record.
"""

from typing import Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..models.stats import Statistics
from ..utils.game_logger import game_logger
from .persistence import PersistenceGateway


class StatsAggregator:
    """
    Maintains totals, the guess histogram and streaks.

    Each day is counted once: the first record() for a day number wins and
    later calls for it are ignored, so replaying old days never inflates
    the totals.

    Streak policy: a win extends the streak when the latest completed day
    before it is exactly the previous day number (or when nothing was
    completed before it), and restarts at 1 after a gap. Days may be
    completed out of calendar order; adjacency is judged against completed
    day numbers, not against the order in which they were played.
    """

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    def get_statistics(self) -> Statistics:
        return self.gateway.get_statistics() or Statistics()

    def record(self, day_number: int, has_won: bool, guess_count: int) -> Optional[Statistics]:
        """
        Fold one finished day into the statistics.

        Args:
            day_number: Day that just finished
            has_won: Whether the day was won
            guess_count: Number of guesses used (1..MAX_ATTEMPTS)

        Returns:
            The updated Statistics, or None if the day was already counted
        """
        if has_won and not 1 <= guess_count <= MAX_ATTEMPTS:
            raise ValueError(f"Winning guess count must be between 1 and {MAX_ATTEMPTS}, got {guess_count}")

        stats = self.get_statistics()
        if day_number in stats.completed_days:
            return None

        previous_days = [day for day in stats.completed_days if day < day_number]
        prev_day = max(previous_days) if previous_days else None
        stats.completed_days.add(day_number)

        if has_won:
            if prev_day is None or prev_day == day_number - 1:
                stats.current_streak += 1
            else:
                stats.current_streak = 1
        else:
            stats.current_streak = 0

        stats.games_played += 1
        if has_won:
            stats.games_won += 1
            stats.guess_distribution[guess_count - 1] += 1

        stats.max_streak = max(stats.max_streak, stats.current_streak)
        stats.last_played_day = day_number

        self.gateway.put_statistics(stats)

        game_logger.log_game_event(
            day_number, 'stats_recorded',
            has_won=has_won, guess_count=guess_count,
            current_streak=stats.current_streak, games_played=stats.games_played
        )
        return stats

    def reset(self) -> None:
        """Erase every stored session and the statistics record."""
        self.gateway.clear()
        game_logger.log_game_event(None, 'data_cleared')
