"""
Room Controller

Handles room-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from ..services.errors import RoomNotFound
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_room_id

room_bp = Blueprint('room', __name__)


@room_bp.route('/rooms/<room_id>/state', methods=['GET'])
def get_room_state(room_id):
    """Get the current state of a room."""
    room_id = normalize_room_id(room_id)
    try:
        game_service = current_app.extensions['bingo']['game_service']

        # Log user action
        game_logger.log_user_action(request, 'get_room_state', room_id)

        state = game_service.get_room_state(room_id)
        response_data = {
            'success': True,
            'state': state.to_dict()
        }

        # Log successful response
        game_logger.log_server_response(
            request, 'get_room_state', True, response_data, room_id,
            turn=state.turn.value, finished=state.finished
        )

        return jsonify(response_data)

    except RoomNotFound as e:
        error_response = {
            'success': False,
            'error': e.message
        }
        game_logger.log_server_response(request, 'get_room_state', False, error_response, room_id)
        return jsonify(error_response), 404

    except Exception as e:
        game_logger.log_error(request, e, 'get_room_state', room_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_room_state', False, error_response, room_id)
        return jsonify(error_response), 500
