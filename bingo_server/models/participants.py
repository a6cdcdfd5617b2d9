"""
Participant Roles

Bidirectional mapping between connection ids and roles within one room.
"""

from typing import Dict, List, Optional

from .game import Role, PLAYER_ROLES


class Participants:
    """
    Tracks which connection holds which role in a room.

    Player seats are keyed by role so that at most one connection can hold
    FIRST_PLAYER and at most one SECOND_PLAYER. Any number of connections
    may be spectators. Not thread-safe on its own; callers hold the room lock.
    """

    def __init__(self):
        self._roles: Dict[str, Role] = {}  # sid -> role
        self._seats: Dict[Role, Optional[str]] = {role: None for role in PLAYER_ROLES}

    def role_of(self, sid: str) -> Optional[Role]:
        return self._roles.get(sid)

    def holder_of(self, role: Role) -> Optional[str]:
        """Connection seated in a player role, if any."""
        return self._seats.get(role)

    def vacant_seat(self) -> Optional[Role]:
        """First open player seat, FIRST_PLAYER before SECOND_PLAYER."""
        for role in PLAYER_ROLES:
            if self._seats[role] is None:
                return role
        return None

    def seat(self, sid: str, role: Role) -> None:
        """
        Bind a connection to a player seat.

        Any role the connection held before is released first.

        Raises:
            ValueError: If the role is not a player role or the seat is
                held by another connection
        """
        if not role.is_player:
            raise ValueError("Only player roles can be seated")
        holder = self._seats[role]
        if holder is not None and holder != sid:
            raise ValueError(f"Seat {role.value} is already taken")
        self.remove(sid)
        self._seats[role] = sid
        self._roles[sid] = role

    def add_spectator(self, sid: str) -> None:
        self.remove(sid)
        self._roles[sid] = Role.SPECTATOR

    def remove(self, sid: str) -> Optional[Role]:
        """Drop a connection, freeing its seat. Returns the role it held."""
        role = self._roles.pop(sid, None)
        if role is not None and role.is_player and self._seats[role] == sid:
            self._seats[role] = None
        return role

    @property
    def spectators(self) -> List[str]:
        return [sid for sid, role in self._roles.items() if role is Role.SPECTATOR]

    def is_empty(self) -> bool:
        return not self._roles

    def summary(self) -> Dict[str, object]:
        """Seat occupancy as sent to clients."""
        return {
            Role.FIRST_PLAYER.value: self._seats[Role.FIRST_PLAYER] is not None,
            Role.SECOND_PLAYER.value: self._seats[Role.SECOND_PLAYER] is not None,
            'spectators': len(self.spectators),
        }

    def __contains__(self, sid: str) -> bool:
        return sid in self._roles

    def __len__(self) -> int:
        return len(self._roles)
