"""
WebSocket Event Handlers

Handles all WebSocket events for real-time Bingo rooms. Handler return
values are sent back as the Socket.IO acknowledgement.
"""

from flask import request
from ..models.game import Role
from ..services.errors import BingoError, GameFinished, RoomNotFound
from ..utils.decorators import room_id_required
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio, lobby_service, game_service):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'connect')

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Release the connection's seats and drop rooms nobody is left in."""
        try:
            affected = lobby_service.handle_disconnect(request.sid)
            game_logger.log_user_action(request, 'disconnect', rooms=affected, reason=str(reason))
        except Exception as e:
            game_logger.log_error(request, e, 'disconnect')

    @socketio.on('createRoom')
    def handle_create_room(data=None):
        """Create a room; the creator plays first."""
        try:
            game_logger.log_user_action(request, 'create_room')

            result = lobby_service.create_room(request.sid)
            response_data = result.to_dict()

            game_logger.log_server_response(request, 'create_room', True, response_data, result.room_id)
            return response_data

        except Exception as e:
            game_logger.log_error(request, e, 'create_room')
            return {'error': str(e)}

    @socketio.on('joinRoom')
    @room_id_required
    def handle_join_room(data, room_id=None):
        """Join a room as a player or spectator. Reconnecting clients call this to resync."""
        try:
            game_logger.log_user_action(request, 'join_room', room_id)

            result = lobby_service.join_room(request.sid, room_id)
            response_data = result.to_dict()

            game_logger.log_server_response(
                request, 'join_room', True, response_data, room_id, role=result.role.value
            )
            return response_data

        except BingoError as e:
            error_response = {'error': e.message}
            game_logger.log_server_response(request, 'join_room', False, error_response, room_id)
            return error_response
        except Exception as e:
            game_logger.log_error(request, e, 'join_room', room_id)
            return {'error': str(e)}

    @socketio.on('selectNumber')
    @room_id_required
    def handle_select_number(data, room_id=None):
        """Call a number for the acting player."""
        role = Role.parse(data.get('role', data.get('player')))
        number = data.get('number')

        try:
            game_logger.log_user_action(
                request, 'select_number', room_id,
                role=role.value if role else None, number=number
            )

            if isinstance(number, bool) or not isinstance(number, int):
                error_response = {'error': 'Invalid number'}
                game_logger.log_server_response(request, 'select_number', False, error_response, room_id)
                return error_response

            game_service.select_number(room_id, role, number, sid=request.sid)

            response_data = {'ok': True}
            game_logger.log_server_response(request, 'select_number', True, response_data, room_id)
            return response_data

        except RoomNotFound:
            # Unknown rooms and finished games share one message on this event
            error_response = {'error': GameFinished.message}
            game_logger.log_server_response(request, 'select_number', False, error_response, room_id)
            return error_response
        except BingoError as e:
            error_response = {'error': e.message}
            game_logger.log_server_response(request, 'select_number', False, error_response, room_id)
            return error_response
        except Exception as e:
            game_logger.log_error(request, e, 'select_number', room_id)
            return {'error': str(e)}

    @socketio.on('restartGame')
    @room_id_required
    def handle_restart_game(data, room_id=None):
        """Restart a room. Clients pick up the new boards from the state push."""
        try:
            game_logger.log_user_action(request, 'restart_game', room_id)
            game_service.restart_game(room_id, sid=request.sid)
        except Exception as e:
            game_logger.log_error(request, e, 'restart_game', room_id)
