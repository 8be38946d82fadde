"""
Services Package

Contains the puzzle engine and its collaborators.
"""

from .day_clock import DayClock
from .word_bank import WordBank
from .word_selector import DailyWordSelector, select_word_for_day
from .guess_evaluator import evaluate, keyboard_state, status_row
from .share import build_share_text, format_day
from .persistence import (
    JsonFileStore, KeyValueStore, MemoryStore, MongoStore, PersistenceGateway, create_store,
)
from .stats_service import StatsAggregator
from .puzzle_service import PuzzleStateMachine
from .history_service import month_overview

__all__ = [
    'DayClock', 'WordBank', 'DailyWordSelector', 'select_word_for_day',
    'evaluate', 'keyboard_state', 'status_row', 'build_share_text', 'format_day',
    'JsonFileStore', 'KeyValueStore', 'MemoryStore', 'MongoStore', 'PersistenceGateway', 'create_store',
    'StatsAggregator', 'PuzzleStateMachine', 'month_overview',
]
