"""
Game Configuration Constants Module

Board geometry, scoring limits and room identifier format for Bingo.
All game parameters are centralized here so the rules live in one place.
"""

import string
from typing import Final

BOARD_SIZE: Final[int] = 5
"""
Rows and columns on a board.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_NUMBER: Final[int] = BOARD_SIZE * BOARD_SIZE
"""Boards hold each of 1..MAX_NUMBER exactly once."""

BINGO_LETTERS: Final[str] = "BINGO"

MAX_LETTERS: Final[int] = len(BINGO_LETTERS)
"""Completed lines are capped here; reaching it finishes the game."""

ROOM_ID_LENGTH: Final[int] = 6
ROOM_ID_ALPHABET: Final[str] = string.ascii_uppercase + string.digits

# Socket.IO room names are namespaced so they never collide with a sid
SOCKET_ROOM_PREFIX: Final[str] = "room_"
