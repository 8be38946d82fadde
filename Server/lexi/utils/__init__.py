"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_engine, websocket_payload_required
from .helpers import get_engine, parse_int
from .game_logger import game_logger

__all__ = [
    'require_engine', 'websocket_payload_required',
    'get_engine', 'parse_int', 'game_logger',
]
