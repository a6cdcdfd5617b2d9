"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import room_id_required
from .helpers import get_connection_identity, normalize_room_id
from .game_logger import game_logger

__all__ = ['room_id_required', 'get_connection_identity', 'normalize_room_id', 'game_logger']
