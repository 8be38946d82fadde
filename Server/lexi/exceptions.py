"""
Engine Exceptions

All errors raised by the puzzle engine derive from LexiError so callers can
handle them at one boundary. None of them is fatal to the process.
"""


class LexiError(Exception):
    """Base class for puzzle engine errors."""


class FutureDayNotAllowed(LexiError):
    """Raised when navigating to a day after today."""

    def __init__(self, day_number: int, today_number: int):
        self.day_number = day_number
        self.today_number = today_number
        super().__init__(f"Day {day_number} is in the future (today is day {today_number})")


class IndexOutOfRange(LexiError, IndexError):
    """Raised on a word bank lookup outside [0, length)."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Word index {index} out of range for bank of {length} words")


class StorageError(LexiError):
    """Raised when the key-value store cannot read, decode, or write a value."""

    def __init__(self, message: str, key: str = None):
        self.key = key
        super().__init__(message)
