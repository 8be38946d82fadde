"""
WebSocket Event Handlers

Socket.IO mirror of the puzzle HTTP endpoints, for clients that keep a
live connection instead of polling.
"""

from dataclasses import asdict
from flask_socketio import emit
from ..exceptions import FutureDayNotAllowed, StorageError
from ..utils.decorators import websocket_payload_required
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_int


def register_websocket_handlers(socketio, puzzle):
    """
    Register all WebSocket event handlers.

    Args:
        socketio: SocketIO instance of the app
        puzzle: PuzzleStateMachine built by the app factory
    """

    def emit_state():
        emit('puzzle_state', asdict(puzzle.view()))

    @socketio.on('connect')
    def handle_connect():
        """Log new WebSocket connections."""
        game_logger.log_user_action(None, 'ws_connect', puzzle.day_number)

    @socketio.on('load_puzzle')
    def handle_load_puzzle(data=None):
        """Send the state of the loaded day (today's on first use)."""
        try:
            game_logger.log_user_action(None, 'ws_load_puzzle', puzzle.day_number)
            emit_state()
        except StorageError as e:
            game_logger.log_error(None, e, 'ws_load_puzzle', puzzle.day_number)
            emit('error', {'error': 'Storage unavailable'})

    @socketio.on('submit_guess')
    @websocket_payload_required
    def handle_submit_guess(data):
        """Apply a guess and answer with guess_result (and the new state)."""
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required'})
            return

        try:
            puzzle.ensure_loaded()
            game_logger.log_user_action(None, 'ws_submit_guess', puzzle.day_number, guess_length=len(guess))

            result = puzzle.submit_guess(guess)
            emit('guess_result', result.to_dict())
            if result.accepted:
                emit_state()
        except StorageError as e:
            game_logger.log_error(None, e, 'ws_submit_guess', puzzle.day_number)
            emit('error', {'error': 'Storage unavailable'})

    @socketio.on('navigate')
    @websocket_payload_required
    def handle_navigate(data):
        """Switch days: {"day_number": n} or {"direction": -1 | 1}."""
        day_number = parse_int(data.get('day_number'))
        direction = parse_int(data.get('direction'))

        try:
            game_logger.log_user_action(
                None, 'ws_navigate', puzzle.day_number,
                target_day=day_number, direction=direction
            )
            if day_number is not None:
                puzzle.navigate_to(day_number)
            elif direction is not None:
                puzzle.navigate_by(direction)
            else:
                emit('error', {'error': 'day_number or direction is required'})
                return
            emit_state()
        except FutureDayNotAllowed as e:
            emit('error', {'error': str(e), 'error_kind': 'FutureDayNotAllowed'})
        except StorageError as e:
            game_logger.log_error(None, e, 'ws_navigate', puzzle.day_number)
            emit('error', {'error': 'Storage unavailable'})
