"""
Room Model

The mutable aggregate for one game: two boards, their marks, the turn,
the finish flag and the participants. Every read or write of a room goes
through ``room.lock``.
"""

import threading
import time
from typing import Optional

from .board import Board, detect_lines, empty_marks
from .game import Role, RoomSnapshot
from .participants import Participants
from ..config.game_settings import MAX_LETTERS


class Room:
    """Server-side state of a single Bingo room."""

    def __init__(self, room_id: str, board_p1: Board, board_p2: Board):
        self.room_id = room_id
        self.lock = threading.Lock()
        self.participants = Participants()
        self.closed = False
        self.created_at = time.time()
        self.reset(board_p1, board_p2)

    def reset(self, board_p1: Board, board_p2: Board) -> None:
        """Start a fresh game on new boards, keeping the participants."""
        self.board_p1 = board_p1
        self.board_p2 = board_p2
        self.marked_p1 = empty_marks()
        self.marked_p2 = empty_marks()
        self.turn = Role.FIRST_PLAYER
        self.finished = False
        self.touch()

    def touch(self) -> None:
        self.updated_at = time.time()

    # Letters are always derived from the marks, never stored
    @property
    def letters_p1(self) -> int:
        return detect_lines(self.marked_p1).line_count

    @property
    def letters_p2(self) -> int:
        return detect_lines(self.marked_p2).line_count

    @property
    def winner(self) -> Optional[str]:
        if not self.finished:
            return None
        p1_done = self.letters_p1 >= MAX_LETTERS
        p2_done = self.letters_p2 >= MAX_LETTERS
        if p1_done and p2_done:
            return "DRAW"
        if p1_done:
            return Role.FIRST_PLAYER.value
        if p2_done:
            return Role.SECOND_PLAYER.value
        return None

    def snapshot(self) -> RoomSnapshot:
        """Deep copy of the current state. Call with the lock held."""
        lines_p1 = detect_lines(self.marked_p1)
        lines_p2 = detect_lines(self.marked_p2)
        return RoomSnapshot(
            room_id=self.room_id,
            board_p1=[row[:] for row in self.board_p1],
            board_p2=[row[:] for row in self.board_p2],
            marked_p1=[row[:] for row in self.marked_p1],
            marked_p2=[row[:] for row in self.marked_p2],
            turn=self.turn,
            letters_p1=lines_p1.line_count,
            letters_p2=lines_p2.line_count,
            finished=self.finished,
            winner=self.winner,
            in_line_p1=lines_p1.cells_in_line,
            in_line_p2=lines_p2.cells_in_line,
            players=self.participants.summary(),
        )
