"""
Statistics Data Models

Contains the lifetime statistics record folded from completed days.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..config.game_settings import MAX_ATTEMPTS


@dataclass
class Statistics:
    """Global lifetime statistics (one record, not per day)."""
    games_played: int = 0
    games_won: int = 0
    guess_distribution: List[int] = field(default_factory=lambda: [0] * MAX_ATTEMPTS)
    current_streak: int = 0
    max_streak: int = 0
    last_played_day: Optional[int] = None
    completed_days: Set[int] = field(default_factory=set)

    @property
    def games_lost(self) -> int:
        return self.games_played - self.games_won

    @property
    def win_percentage(self) -> int:
        """Share of games won, rounded half up to a whole percent."""
        if self.games_played == 0:
            return 0
        return int(math.floor(self.games_won / self.games_played * 100 + 0.5))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gamesPlayed": self.games_played,
            "gamesWon": self.games_won,
            "guessDistribution": list(self.guess_distribution),
            "currentStreak": self.current_streak,
            "maxStreak": self.max_streak,
            "lastPlayedDay": self.last_played_day,
            "completedDays": sorted(self.completed_days),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statistics":
        distribution = [int(count) for count in data.get("guessDistribution", [])]
        # Pad or truncate records written with a different attempt limit
        distribution = (distribution + [0] * MAX_ATTEMPTS)[:MAX_ATTEMPTS]
        last_played = data.get("lastPlayedDay")
        return cls(
            games_played=int(data.get("gamesPlayed", 0)),
            games_won=int(data.get("gamesWon", 0)),
            guess_distribution=distribution,
            current_streak=int(data.get("currentStreak", 0)),
            max_streak=int(data.get("maxStreak", 0)),
            last_played_day=int(last_played) if last_played is not None else None,
            completed_days={int(day) for day in data.get("completedDays", [])},
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """API representation (snake_case, with derived values)."""
        return {
            "games_played": self.games_played,
            "games_won": self.games_won,
            "win_percentage": self.win_percentage,
            "guess_distribution": list(self.guess_distribution),
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
            "last_played_day": self.last_played_day,
        }
