"""
WebSocket Package

Socket.IO event handlers and the room broadcast channel.
"""

from .broadcaster import RoomPublisher, SocketIORoomPublisher, socket_room

__all__ = ['RoomPublisher', 'SocketIORoomPublisher', 'socket_room']
