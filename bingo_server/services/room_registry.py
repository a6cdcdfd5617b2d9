"""
Room Registry

Owns the id -> room mapping and the room lifecycle (create, look up, delete).
"""

import random
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import RoomNotFound
from ..config.game_settings import ROOM_ID_ALPHABET, ROOM_ID_LENGTH
from ..models.board import Board, generate_board
from ..models.room import Room
from ..utils.game_logger import game_logger


class RoomRegistry:
    """
    Process-wide set of live rooms for one server instance.

    The registry lock only guards the mapping itself. Code holding a room lock
    may call into the registry, but the registry lock is never held while
    waiting on a room lock, so the two cannot deadlock.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def deal_boards(self) -> Tuple[Board, Board]:
        """Two independently shuffled boards."""
        return generate_board(self._rng), generate_board(self._rng)

    def _new_room_id(self) -> str:
        while True:
            room_id = ''.join(self._rng.choice(ROOM_ID_ALPHABET) for _ in range(ROOM_ID_LENGTH))
            if room_id not in self._rooms:
                return room_id

    def create_room(self) -> Room:
        """Allocate a fresh room with a unique id and newly dealt boards."""
        board_p1, board_p2 = self.deal_boards()
        with self._lock:
            room_id = self._new_room_id()
            room = Room(room_id, board_p1, board_p2)
            self._rooms[room_id] = room

        game_logger.log_game_event(room_id, 'room_created', active_rooms=len(self._rooms))
        return room

    def get_room(self, room_id: str) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def require_room(self, room_id: str) -> Room:
        """
        Look up a room that must exist.

        Raises:
            RoomNotFound: If no live room has this id
        """
        room = self.get_room(room_id)
        if room is None:
            raise RoomNotFound(room_id)
        return room

    @contextmanager
    def locked_room(self, room_id: str) -> Iterator[Room]:
        """
        Hold a live room's lock for the duration of one operation.

        Raises:
            RoomNotFound: If the room is unknown or was closed while waiting
        """
        room = self.require_room(room_id)
        with room.lock:
            if room.closed:
                raise RoomNotFound(room_id)
            yield room

    def delete_room(self, room_id: str) -> bool:
        """
        Remove a room from the registry and close it.

        Callers should hold the room lock so that no operation already
        waiting on the room can act on it afterwards.

        Returns:
            bool: True if the room was deleted, False if not found
        """
        with self._lock:
            room = self._rooms.pop(room_id, None)
        if room is None:
            return False
        room.closed = True

        game_logger.log_game_event(room_id, 'room_deleted', active_rooms=len(self._rooms))
        return True

    def rooms(self) -> List[Room]:
        """Copy of the live rooms, safe to iterate while rooms come and go."""
        with self._lock:
            return list(self._rooms.values())

    def room_ids(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def __contains__(self, room_id: str) -> bool:
        with self._lock:
            return room_id in self._rooms

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)
