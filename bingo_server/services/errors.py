"""
Service Errors

Rejections raised by the game services. Each carries the message sent back
to the requesting connection; none of them leave a room modified.
"""


class BingoError(Exception):
    """Base class for recoverable, per-request rejections."""
    message = "Request rejected"

    def __init__(self, room_id=None, message=None):
        self.room_id = room_id
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RoomNotFound(BingoError):
    message = "Room not found"


class NotYourTurn(BingoError):
    message = "Not your turn"


class GameFinished(BingoError):
    message = "Invalid room or game finished"
