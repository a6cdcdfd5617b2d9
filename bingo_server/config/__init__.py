"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Bingo rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    BOARD_SIZE, MAX_NUMBER, MAX_LETTERS, BINGO_LETTERS,
    ROOM_ID_LENGTH, ROOM_ID_ALPHABET, SOCKET_ROOM_PREFIX
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'BOARD_SIZE', 'MAX_NUMBER', 'MAX_LETTERS', 'BINGO_LETTERS',
    'ROOM_ID_LENGTH', 'ROOM_ID_ALPHABET', 'SOCKET_ROOM_PREFIX'
]
