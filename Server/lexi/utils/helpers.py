"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import current_app


def get_engine(app=None) -> Optional[Dict]:
    """Engine components registered on the Flask app by create_app."""
    app = app or current_app
    return app.extensions.get('lexi')


def parse_int(value) -> Optional[int]:
    """int(value), or None for anything that is not an integer (bools included)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
