"""
Game Controller

Handles all puzzle-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.app_config import Config
from ..exceptions import FutureDayNotAllowed, StorageError
from ..services.history_service import month_overview
from ..utils.decorators import require_engine
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_int

game_bp = Blueprint('game', __name__)


def _error(action, message, status, day_number=None, **extra):
    error_response = {
        'success': False,
        'error': message,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, day_number)
    return jsonify(error_response), status


@game_bp.route('/puzzle', methods=['GET'])
@require_engine('puzzle')
def get_puzzle(puzzle):
    """Get the state of the loaded day (today's puzzle on first call)."""
    try:
        game_logger.log_user_action(request, 'get_puzzle', puzzle.day_number)

        state = puzzle.view()
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_puzzle', True, response_data, state.day_number,
            current_round=state.current_round, game_over=state.game_over
        )
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'get_puzzle', puzzle.day_number)
        return _error('get_puzzle', 'Storage unavailable', 503, puzzle.day_number)
    except Exception as e:
        game_logger.log_error(request, e, 'get_puzzle', puzzle.day_number)
        return _error('get_puzzle', str(e), 500, puzzle.day_number)


@game_bp.route('/puzzle/guess', methods=['POST'])
@require_engine('puzzle')
def submit_guess(puzzle):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            return _error('submit_guess', 'Guess is required', 400, puzzle.day_number)

        guess = data['guess']
        puzzle.ensure_loaded()

        game_logger.log_user_action(
            request, 'submit_guess', puzzle.day_number,
            guess_length=len(guess)
        )

        result = puzzle.submit_guess(guess)
        if not result.accepted:
            return _error(
                'submit_guess', result.message, 400, puzzle.day_number,
                error_kind=result.rejection.value
            )

        state = puzzle.view()
        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, state.day_number,
            round=state.current_round, game_over=state.game_over
        )
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'submit_guess', puzzle.day_number)
        return _error('submit_guess', 'Storage unavailable', 503, puzzle.day_number)
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', puzzle.day_number)
        return _error('submit_guess', str(e), 500, puzzle.day_number)


@game_bp.route('/puzzle/navigate', methods=['POST'])
@require_engine('puzzle')
def navigate(puzzle):
    """Switch to another day: body {"day_number": n} or {"direction": -1 | 1}."""
    try:
        data = request.get_json(silent=True) or {}
        day_number = parse_int(data.get('day_number'))
        direction = parse_int(data.get('direction'))

        game_logger.log_user_action(
            request, 'navigate', puzzle.day_number,
            target_day=day_number, direction=direction
        )

        if day_number is not None:
            puzzle.navigate_to(day_number)
        elif direction is not None:
            puzzle.navigate_by(direction)
        else:
            return _error('navigate', 'day_number or direction is required', 400, puzzle.day_number)

        state = puzzle.view()
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'navigate', True, response_data, state.day_number)
        return jsonify(response_data)

    except FutureDayNotAllowed as e:
        return _error(
            'navigate', str(e), 403, puzzle.day_number,
            error_kind='FutureDayNotAllowed', today_number=e.today_number
        )
    except StorageError as e:
        game_logger.log_error(request, e, 'navigate', puzzle.day_number)
        return _error('navigate', 'Storage unavailable', 503, puzzle.day_number)
    except Exception as e:
        game_logger.log_error(request, e, 'navigate', puzzle.day_number)
        return _error('navigate', str(e), 500, puzzle.day_number)


@game_bp.route('/puzzle/share', methods=['GET'])
@require_engine('puzzle')
def share(puzzle):
    """Shareable result text for the loaded day, once it is over."""
    try:
        session = puzzle.ensure_loaded()
        game_logger.log_user_action(request, 'share', session.day_number)

        if not session.game_over:
            return _error('share', 'Finish the puzzle before sharing', 409, session.day_number)

        decoration = request.args.get('decoration') or Config.SHARE_DECORATION
        response_data = {
            'success': True,
            'text': puzzle.share_text(decoration)
        }
        game_logger.log_server_response(request, 'share', True, response_data, session.day_number)
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'share', puzzle.day_number)
        return _error('share', 'Storage unavailable', 503, puzzle.day_number)
    except Exception as e:
        game_logger.log_error(request, e, 'share', puzzle.day_number)
        return _error('share', str(e), 500, puzzle.day_number)


@game_bp.route('/calendar/<int:year>/<int:month>', methods=['GET'])
@require_engine('gateway', 'clock')
def calendar_month(year, month, gateway, clock):
    """Per-day status for one calendar month."""
    try:
        game_logger.log_user_action(request, 'calendar', year=year, month=month)

        days = month_overview(gateway, clock, year, month)
        response_data = {
            'success': True,
            'year': year,
            'month': month,
            'today_number': clock.today_number(),
            'days': days
        }
        game_logger.log_server_response(request, 'calendar', True, {'days': len(days)})
        return jsonify(response_data)

    except ValueError as e:
        return _error('calendar', str(e), 400)
    except Exception as e:
        game_logger.log_error(request, e, 'calendar')
        return _error('calendar', str(e), 500)


@game_bp.route('/health', methods=['GET'])
@require_engine('puzzle')
def health_check(puzzle):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'today_number': puzzle.clock.today_number(),
            'loaded_day': puzzle.day_number,
            'phase': puzzle.phase.value,
            'word_count': len(puzzle.word_bank),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
