"""
Event Payload Decorators

Contains decorators that validate Socket.IO event payloads before the
handler runs.
"""

from functools import wraps

from .helpers import normalize_room_id


def room_id_required(f):
    """
    Decorator for WebSocket events that address a room.

    Reads ``roomId`` from the event payload, normalizes it and passes it to
    the handler as the ``room_id`` keyword. Events without a usable room id
    are answered with an error ack and never reach the handler.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = args[0] if args and isinstance(args[0], dict) else {}
        room_id = normalize_room_id(data.get('roomId'))
        if not room_id:
            return {'error': 'Room ID required'}

        kwargs['room_id'] = room_id
        return f(*args, **kwargs)
    
    return decorated_function
