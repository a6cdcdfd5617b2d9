"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .board import generate_board, empty_marks, detect_lines, mark_number, LineResult
from .game import Role, RoomSnapshot, JoinResult
from .participants import Participants
from .room import Room

__all__ = [
    'generate_board', 'empty_marks', 'detect_lines', 'mark_number', 'LineResult',
    'Role', 'RoomSnapshot', 'JoinResult', 'Participants', 'Room'
]
