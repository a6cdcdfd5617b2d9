"""
Game Service

Contains the per-room Bingo state machine: calling numbers, scoring lines,
turn order, finishing and restarting games.
"""

from typing import Optional

from .errors import GameFinished, NotYourTurn
from .room_registry import RoomRegistry
from ..config.game_settings import MAX_LETTERS
from ..models.board import mark_number
from ..models.game import Role, RoomSnapshot
from ..utils.game_logger import game_logger
from ..websocket.broadcaster import RoomPublisher


class GameService:
    """
    Core game service applying moves to rooms.

    This class handles:
    - Turn enforcement and connection ownership of the acting role
    - Marking called numbers on both boards
    - Finishing the game once a player completes MAX_LETTERS lines
    - Restarting a room on fresh boards
    - Publishing the new state after every committed change
    """

    def __init__(self, registry: RoomRegistry, publisher: Optional[RoomPublisher] = None):
        self.registry = registry
        self.publisher = publisher or RoomPublisher()

    def select_number(self, room_id: str, role: Optional[Role], number: int,
                      sid: Optional[str] = None) -> RoomSnapshot:
        """
        Call a number for the player on turn.

        The number is marked on both boards; both players race to finish
        their own board from the same called sequence. Calling a number that
        is already marked, or not on the board at all, still uses up the turn.

        Args:
            room_id: Room identifier
            role: Role the caller is acting as
            number: Number being called
            sid: Connection making the call; when given it must hold ``role``

        Returns:
            RoomSnapshot: State after the move

        Raises:
            RoomNotFound: If the room does not exist
            GameFinished: If the room's game is over
            NotYourTurn: If ``role`` is not on turn or not held by ``sid``
        """
        with self.registry.locked_room(room_id) as room:
            if room.finished:
                raise GameFinished(room_id)
            if role is not room.turn:
                raise NotYourTurn(room_id)
            if sid is not None and room.participants.role_of(sid) is not role:
                raise NotYourTurn(room_id)

            marked_p1 = mark_number(room.board_p1, room.marked_p1, number)
            marked_p2 = mark_number(room.board_p2, room.marked_p2, number)

            letters_p1 = room.letters_p1
            letters_p2 = room.letters_p2
            if letters_p1 >= MAX_LETTERS or letters_p2 >= MAX_LETTERS:
                room.finished = True
            else:
                room.turn = room.turn.other()
            room.touch()

            game_logger.log_game_event(
                room_id, 'number_selected', sid,
                role=role.value, number=number,
                newly_marked_p1=marked_p1, newly_marked_p2=marked_p2,
                letters_p1=letters_p1, letters_p2=letters_p2
            )
            if room.finished:
                game_logger.log_game_event(room_id, 'game_finished', sid, winner=room.winner)

            snapshot = room.snapshot()
            self.publisher.publish(room_id, snapshot)
            return snapshot

    def restart_game(self, room_id: str, sid: Optional[str] = None) -> Optional[RoomSnapshot]:
        """
        Start the room over on newly dealt boards.

        Any participant may restart, spectators included. Unknown rooms are
        ignored.

        Returns:
            RoomSnapshot of the fresh game, or None if the room was not found
        """
        room = self.registry.get_room(room_id)
        if room is None:
            return None

        board_p1, board_p2 = self.registry.deal_boards()
        with room.lock:
            if room.closed:
                return None
            room.reset(board_p1, board_p2)

            game_logger.log_game_event(room_id, 'game_restarted', sid)

            snapshot = room.snapshot()
            self.publisher.publish(room_id, snapshot)
            return snapshot

    def get_room_state(self, room_id: str) -> RoomSnapshot:
        """
        Current state of a room without changing it.

        Raises:
            RoomNotFound: If the room does not exist
        """
        with self.registry.locked_room(room_id) as room:
            return room.snapshot()
