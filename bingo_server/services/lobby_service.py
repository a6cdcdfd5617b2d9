"""
Lobby Service

Assigns connections to rooms and roles, and cleans up after disconnects.
"""

from typing import List, Optional

from .room_registry import RoomRegistry
from ..models.game import JoinResult, Role
from ..utils.game_logger import game_logger
from ..websocket.broadcaster import RoomPublisher


class LobbyService:
    """
    Role manager for Bingo rooms.

    The first two connections in a room are seated as players, everyone
    after that watches as a spectator. A player who drops frees their seat
    for the next join while the game itself carries on untouched.
    """

    def __init__(self, registry: RoomRegistry, publisher: Optional[RoomPublisher] = None):
        self.registry = registry
        self.publisher = publisher or RoomPublisher()

    def create_room(self, sid: str) -> JoinResult:
        """Open a new room with the creating connection as first player."""
        room = self.registry.create_room()
        with room.lock:
            room.participants.seat(sid, Role.FIRST_PLAYER)
            self.publisher.subscribe(room.room_id, sid)

            game_logger.log_game_event(room.room_id, 'player_joined', sid, role=Role.FIRST_PLAYER.value)
            return JoinResult(room.room_id, Role.FIRST_PLAYER, room.snapshot())

    def join_room(self, sid: str, room_id: str) -> JoinResult:
        """
        Join a room, or rejoin it after a reconnect.

        A connection already seated keeps its seat. Otherwise it takes a
        vacant player seat if there is one, else it becomes a spectator. The
        live state is returned as-is, so this doubles as a resync.

        Raises:
            RoomNotFound: If the room does not exist
        """
        with self.registry.locked_room(room_id) as room:
            participants = room.participants
            current = participants.role_of(sid)

            if current is not None and current.is_player:
                role = current
            else:
                vacant = participants.vacant_seat()
                if vacant is not None:
                    participants.seat(sid, vacant)
                    role = vacant
                else:
                    participants.add_spectator(sid)
                    role = Role.SPECTATOR
            self.publisher.subscribe(room_id, sid)

            snapshot = room.snapshot()
            if role is not current:
                game_logger.log_game_event(room_id, 'player_joined', sid, role=role.value)
                # Let the room see the new player; spectators join quietly
                if role.is_player:
                    self.publisher.publish(room_id, snapshot)

            return JoinResult(room_id, role, snapshot)

    def handle_disconnect(self, sid: str) -> List[str]:
        """
        Release every role a connection held.

        Rooms left with nobody in them are deleted; the rest are sent the
        updated participant set.

        Returns:
            List of room ids the connection was removed from
        """
        affected = []
        for room in self.registry.rooms():
            with room.lock:
                if room.closed or sid not in room.participants:
                    continue
                role = room.participants.remove(sid)
                affected.append(room.room_id)

                game_logger.log_game_event(room.room_id, 'player_left', sid, role=role.value)

                if room.participants.is_empty():
                    self.registry.delete_room(room.room_id)
                else:
                    self.publisher.publish(room.room_id, room.snapshot())

        return affected
