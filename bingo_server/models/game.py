"""
Game Data Models

Contains the role enum and the serializable room snapshot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class Role(Enum):
    """A connection's standing within a room. Values are the wire tags."""
    FIRST_PLAYER = "P1"
    SECOND_PLAYER = "P2"
    SPECTATOR = "SPECTATOR"

    @property
    def is_player(self) -> bool:
        return self is not Role.SPECTATOR

    def other(self) -> "Role":
        """The opposing player role."""
        if self is Role.FIRST_PLAYER:
            return Role.SECOND_PLAYER
        if self is Role.SECOND_PLAYER:
            return Role.FIRST_PLAYER
        raise ValueError("Spectators have no opponent")

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        """Look up a role by wire tag, returning None for unknown values."""
        if isinstance(value, Role):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


PLAYER_ROLES = (Role.FIRST_PLAYER, Role.SECOND_PLAYER)


@dataclass(frozen=True)
class RoomSnapshot:
    """Point-in-time copy of a room, safe to hand out after the lock is released."""
    room_id: str
    board_p1: List[List[int]]
    board_p2: List[List[int]]
    marked_p1: List[List[bool]]
    marked_p2: List[List[bool]]
    turn: Role
    letters_p1: int
    letters_p2: int
    finished: bool
    winner: Optional[str]  # "P1", "P2", "DRAW", or None while in progress
    in_line_p1: List[List[bool]]
    in_line_p2: List[List[bool]]
    players: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Wire format pushed as ``stateUpdate`` and returned on create/join."""
        return {
            'roomId': self.room_id,
            'boardP1': self.board_p1,
            'boardP2': self.board_p2,
            'markedP1': self.marked_p1,
            'markedP2': self.marked_p2,
            'turn': self.turn.value,
            'lettersP1': self.letters_p1,
            'lettersP2': self.letters_p2,
            'finished': self.finished,
            'winner': self.winner,
            'inLineP1': self.in_line_p1,
            'inLineP2': self.in_line_p2,
            'players': dict(self.players),
        }


@dataclass(frozen=True)
class JoinResult:
    """Outcome of creating or joining a room."""
    room_id: str
    role: Role
    state: RoomSnapshot

    def to_dict(self) -> Dict[str, Any]:
        return {
            'roomId': self.room_id,
            'role': self.role.value,
            # Older clients read the role from "player"
            'player': self.role.value,
            'state': self.state.to_dict(),
        }
