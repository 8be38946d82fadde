"""
Puzzle Service

State machine for the day being played: loads or creates the day's session,
validates and applies guesses, and hands finished days to the statistics.
"""

import threading
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..exceptions import FutureDayNotAllowed, StorageError
from ..models.game import GuessRejection, GuessResult, LetterStatus, PuzzlePhase, PuzzleSession, PuzzleView
from ..utils.game_logger import game_logger
from .day_clock import DayClock
from .guess_evaluator import evaluate, keyboard_state as letter_states
from .persistence import PersistenceGateway
from .share import build_share_text, format_day
from .stats_service import StatsAggregator
from .word_bank import WordBank
from .word_selector import DailyWordSelector

REJECTION_MESSAGES = {
    GuessRejection.INVALID_LENGTH: "Not enough letters",
    GuessRejection.DUPLICATE_GUESS: "You've already tried this word",
    GuessRejection.UNKNOWN_WORD: "Not in word list",
    GuessRejection.NOT_ACTIVE: "This puzzle is already finished",
}


class PuzzleStateMachine:
    """
    Owns the session of the day currently being played.

    Phases: LOADING (nothing loaded yet) -> ACTIVE -> FINISHED. A finished
    session stays finished; a restored finished session is never reopened.

    The host builds one instance with its collaborators and passes it to
    whatever needs it. Mutating calls are serialized with a lock so a
    threaded server cannot interleave two guesses on the same session.
    """

    def __init__(self,
                 word_bank: WordBank,
                 selector: DailyWordSelector,
                 gateway: PersistenceGateway,
                 stats: StatsAggregator,
                 clock: Optional[DayClock] = None):
        self.word_bank = word_bank
        self.selector = selector
        self.gateway = gateway
        self.stats = stats
        self.clock = clock or DayClock()
        self._session: Optional[PuzzleSession] = None
        self._lock = threading.RLock()

    # -------------------------
    # State
    # -------------------------

    @property
    def phase(self) -> PuzzlePhase:
        if self._session is None:
            return PuzzlePhase.LOADING
        return PuzzlePhase.FINISHED if self._session.game_over else PuzzlePhase.ACTIVE

    @property
    def session(self) -> Optional[PuzzleSession]:
        """Copy of the loaded session (None while LOADING)."""
        return self._session.copy() if self._session else None

    @property
    def day_number(self) -> Optional[int]:
        return self._session.day_number if self._session else None

    @property
    def is_current_day(self) -> bool:
        return self._session is not None and self._session.day_number == self.clock.today_number()

    # -------------------------
    # Loading and navigation
    # -------------------------

    def load_or_create(self, day_number: int) -> PuzzleSession:
        """
        Restore the stored session for day_number, or start a fresh one.

        A failed read is logged and treated as "no stored session", which
        favors being able to play over surfacing the storage fault.

        Raises:
            StorageError: If a fresh session cannot be written
        """
        with self._lock:
            try:
                stored = self.gateway.get_session(day_number)
            except StorageError as e:
                game_logger.log_error(None, e, 'load_session', day_number)
                stored = None

            if stored is not None:
                self._session = stored
                game_logger.log_game_event(
                    day_number, 'puzzle_restored',
                    guesses=len(stored.guesses), game_over=stored.game_over
                )
                return stored.copy()

            fresh = PuzzleSession(day_number=day_number, target_word=self.selector.word_for_day(day_number))
            self.gateway.put_session(fresh)
            self._session = fresh
            game_logger.log_game_event(day_number, 'puzzle_created')
            return fresh.copy()

    def load_today(self) -> PuzzleSession:
        return self.load_or_create(self.clock.today_number())

    def ensure_loaded(self) -> PuzzleSession:
        """Load today's puzzle if nothing is loaded yet."""
        with self._lock:
            if self._session is None:
                return self.load_today()
            return self._session.copy()

    def navigate_to(self, day_number: int) -> PuzzleSession:
        """
        Switch to another day. Future days are refused; the loaded session
        is left untouched in that case.

        Raises:
            FutureDayNotAllowed: If day_number is after today
        """
        today = self.clock.today_number()
        if day_number > today:
            raise FutureDayNotAllowed(day_number, today)
        with self._lock:
            return self.load_or_create(day_number)

    def navigate_by(self, direction: int) -> PuzzleSession:
        """Move relative to the loaded day (e.g. -1 for the previous day)."""
        with self._lock:
            current = self.day_number if self._session else self.clock.today_number()
            return self.navigate_to(current + direction)

    # -------------------------
    # Guessing
    # -------------------------

    def _rejection(self, guess: str) -> Optional[GuessRejection]:
        if self.phase is not PuzzlePhase.ACTIVE:
            return GuessRejection.NOT_ACTIVE
        if len(guess) != WORD_LENGTH:
            return GuessRejection.INVALID_LENGTH
        if guess in self._session.guesses:
            return GuessRejection.DUPLICATE_GUESS
        if not self.word_bank.contains(guess):
            return GuessRejection.UNKNOWN_WORD
        return None

    def submit_guess(self, raw_guess: str) -> GuessResult:
        """
        Validate and apply a guess.

        Checks run in order (length, repeat, dictionary) and the first
        failure is returned without touching the session. An accepted guess
        is persisted before the in-memory session changes, so a failed write
        leaves the session as it was.

        Args:
            raw_guess: Guess as typed; surrounding whitespace and case are ignored

        Returns:
            GuessResult with statuses and flags, or the rejection kind

        Raises:
            StorageError: If the updated session or statistics cannot be written
        """
        guess = (raw_guess or "").strip().lower()

        with self._lock:
            rejection = self._rejection(guess)
            if rejection is not None:
                return GuessResult(
                    accepted=False,
                    session=self._session.copy() if self._session else None,
                    rejection=rejection,
                    message=REJECTION_MESSAGES[rejection] if self._session else "No puzzle loaded",
                )

            updated = self._session.copy()
            updated.guesses.append(guess)
            statuses = evaluate(guess, updated.target_word)

            message = None
            if guess == updated.target_word:
                updated.has_won = True
                updated.game_over = True
                message = self.selector.win_celebration_text(updated.day_number)
            elif len(updated.guesses) == MAX_ATTEMPTS:
                updated.game_over = True
                message = f"The word was: {updated.target_word.upper()}"

            if updated.game_over:
                # counted before the session is saved; a repeat record of the day is a no-op
                self.stats.record(updated.day_number, updated.has_won, len(updated.guesses))

            self.gateway.put_session(updated)
            self._session = updated

            game_logger.log_game_event(
                updated.day_number, 'guess_accepted',
                round=len(updated.guesses), statuses=[status.value for status in statuses]
            )

            if updated.game_over:
                game_logger.log_game_event(
                    updated.day_number, 'game_won' if updated.has_won else 'game_lost',
                    rounds_used=len(updated.guesses)
                )

            return GuessResult(
                accepted=True,
                session=updated.copy(),
                statuses=statuses,
                message=message,
            )

    # -------------------------
    # Views for the UI
    # -------------------------

    def keyboard_state(self) -> Dict[str, LetterStatus]:
        if self._session is None:
            return {}
        return letter_states(self._session.guesses, self._session.target_word)

    def share_text(self, decoration: str) -> str:
        session = self.ensure_loaded()
        return build_share_text(session.day_number, session.guesses, session.target_word, decoration, self.clock)

    def view(self) -> PuzzleView:
        """Client-facing state of the loaded day; the answer stays hidden until the game is over."""
        session = self.ensure_loaded()
        guess_results: List[List[Tuple[str, str]]] = [
            [(letter, status.value) for letter, status in zip(guess, evaluate(guess, session.target_word))]
            for guess in session.guesses
        ]
        return PuzzleView(
            day_number=session.day_number,
            formatted_day=format_day(self.clock.date_of(session.day_number)),
            today_number=self.clock.today_number(),
            is_current_day=self.is_current_day,
            current_round=len(session.guesses),
            max_attempts=MAX_ATTEMPTS,
            game_over=session.game_over,
            has_won=session.has_won,
            guesses=list(session.guesses),
            guess_results=guess_results,
            letter_status={letter: status.value for letter, status in self.keyboard_state().items()},
            answer=session.target_word if session.game_over else None,
        )
