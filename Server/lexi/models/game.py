"""
Game Data Models

Contains all puzzle-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-position classification of a guess letter against the target."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Ordering used for keyboard aggregation: correct > present > absent."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


class PuzzlePhase(Enum):
    """Lifecycle of the state machine for the loaded day."""
    LOADING = "loading"
    ACTIVE = "active"
    FINISHED = "finished"


class GuessRejection(Enum):
    """Why a submitted guess was not accepted. Rejections never mutate state."""
    INVALID_LENGTH = "InvalidLength"
    DUPLICATE_GUESS = "DuplicateGuess"
    UNKNOWN_WORD = "UnknownWord"
    NOT_ACTIVE = "NotActive"


@dataclass
class PuzzleSession:
    """
    Persisted per-day puzzle state.

    The serialized form uses the camelCase keys of the original client
    storage schema (dayNumber, targetWord, guesses, gameOver, hasWon).
    """
    day_number: int
    target_word: str
    guesses: List[str] = field(default_factory=list)
    game_over: bool = False
    has_won: bool = False

    def copy(self) -> "PuzzleSession":
        return PuzzleSession(
            day_number=self.day_number,
            target_word=self.target_word,
            guesses=list(self.guesses),
            game_over=self.game_over,
            has_won=self.has_won,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dayNumber": self.day_number,
            "targetWord": self.target_word,
            "guesses": list(self.guesses),
            "gameOver": self.game_over,
            "hasWon": self.has_won,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleSession":
        """Build a session from its stored form; guesses are lowercased."""
        return cls(
            day_number=int(data["dayNumber"]),
            target_word=str(data["targetWord"]).lower(),
            guesses=[str(guess).lower() for guess in data.get("guesses", [])],
            game_over=bool(data.get("gameOver", False)),
            has_won=bool(data.get("hasWon", False)),
        )


@dataclass
class PuzzleView:
    """Client-facing puzzle state (the answer is only included once the game is over)."""
    day_number: int
    formatted_day: str
    today_number: int
    is_current_day: bool
    current_round: int
    max_attempts: int
    game_over: bool
    has_won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None


@dataclass
class GuessResult:
    """Structured outcome of PuzzleStateMachine.submit_guess."""
    accepted: bool
    session: Optional[PuzzleSession]
    statuses: List[LetterStatus] = field(default_factory=list)
    rejection: Optional[GuessRejection] = None
    message: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return bool(self.session and self.session.game_over)

    @property
    def has_won(self) -> bool:
        return bool(self.session and self.session.has_won)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted": self.accepted,
            "statuses": [status.value for status in self.statuses],
            "error_kind": self.rejection.value if self.rejection else None,
            "message": self.message,
            "game_over": self.game_over,
            "has_won": self.has_won,
        }
