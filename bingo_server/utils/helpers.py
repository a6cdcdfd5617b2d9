"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_connection_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract connection identity information from a Flask or Socket.IO request."""
    if request_obj is None:
        return {'user_ip': 'system', 'sid': None}

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        # Only set inside Socket.IO event handlers
        'sid': getattr(request_obj, 'sid', None)
    }


def normalize_room_id(value) -> Optional[str]:
    """Room ids are shared by hand, so accept any case and stray whitespace."""
    if not isinstance(value, str):
        return None
    room_id = value.strip().upper()
    return room_id or None
