"""
Services Package

Contains all business logic and service classes.
"""

from .errors import BingoError, RoomNotFound, NotYourTurn, GameFinished
from .room_registry import RoomRegistry
from .game_service import GameService
from .lobby_service import LobbyService

__all__ = [
    'BingoError', 'RoomNotFound', 'NotYourTurn', 'GameFinished',
    'RoomRegistry', 'GameService', 'LobbyService'
]
