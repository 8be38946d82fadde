"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GuessRejection, GuessResult, LetterStatus, PuzzlePhase, PuzzleSession, PuzzleView
from .stats import Statistics

__all__ = [
    'GuessRejection', 'GuessResult', 'LetterStatus', 'PuzzlePhase',
    'PuzzleSession', 'PuzzleView', 'Statistics',
]
