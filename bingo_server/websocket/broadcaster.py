"""
Room Broadcasting

Pushes committed room state to every connection associated with a room.
Services call ``publish`` after each mutation while still holding the room
lock, so pushes leave in the same order the mutations were applied.
"""

from ..config.game_settings import SOCKET_ROOM_PREFIX
from ..models.game import RoomSnapshot
from ..utils.game_logger import game_logger

STATE_UPDATE_EVENT = 'stateUpdate'


def socket_room(room_id: str) -> str:
    """Socket.IO room name for a game room."""
    return f"{SOCKET_ROOM_PREFIX}{room_id}"


class RoomPublisher:
    """
    Subscriber registry keyed by room. The base class delivers nowhere,
    which is what a server without connected clients needs.
    """

    def subscribe(self, room_id: str, sid: str) -> None:
        """Associate a connection with a room's updates."""

    def publish(self, room_id: str, snapshot: RoomSnapshot) -> None:
        """Send a snapshot to every connection associated with the room."""


class SocketIORoomPublisher(RoomPublisher):
    """Delivers room updates through Flask-SocketIO rooms."""

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def subscribe(self, room_id: str, sid: str) -> None:
        # Works outside a request context, unlike flask_socketio.join_room
        self.socketio.server.enter_room(sid, socket_room(room_id), namespace=self.namespace)

    def publish(self, room_id: str, snapshot: RoomSnapshot) -> None:
        # Fire-and-forget: a dead connection is cleaned up by its disconnect event
        try:
            self.socketio.emit(
                STATE_UPDATE_EVENT,
                snapshot.to_dict(),
                to=socket_room(room_id),
                namespace=self.namespace
            )
        except Exception as e:
            game_logger.logger.error(f"Error broadcasting state for room {room_id}: {e}")
