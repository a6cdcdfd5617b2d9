"""
Controllers Package

HTTP blueprints.
"""

from .room_controller import room_bp

__all__ = ['room_bp']
