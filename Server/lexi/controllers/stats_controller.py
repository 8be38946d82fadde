"""
Stats Controller

Handles statistics and stored-data HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..exceptions import StorageError
from ..utils.decorators import require_engine
from ..utils.game_logger import game_logger

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
@require_engine('stats')
def get_stats(stats):
    """Lifetime statistics."""
    try:
        game_logger.log_user_action(request, 'get_stats')

        response_data = {
            'success': True,
            'stats': stats.get_statistics().to_public_dict()
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'get_stats')
        error_response = {
            'success': False,
            'error': 'Storage unavailable'
        }
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 503


@stats_bp.route('/data', methods=['DELETE'])
@require_engine('stats', 'puzzle')
def clear_data(stats, puzzle):
    """Erase all sessions and statistics, then reload today's puzzle."""
    try:
        game_logger.log_user_action(request, 'clear_data')

        stats.reset()
        state = asdict(_reload_today(puzzle))

        response_data = {
            'success': True,
            'state': state
        }
        game_logger.log_server_response(request, 'clear_data', True, response_data)
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'clear_data')
        error_response = {
            'success': False,
            'error': 'Storage unavailable'
        }
        game_logger.log_server_response(request, 'clear_data', False, error_response)
        return jsonify(error_response), 503


def _reload_today(puzzle):
    puzzle.load_today()
    return puzzle.view()
