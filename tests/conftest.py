import os
import random
import sys
import pytest

# Ensure the project root (containing the `bingo_server` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from bingo_server import create_app
from bingo_server.config import TestingConfig
from bingo_server.services import GameService, LobbyService, RoomRegistry
from bingo_server.websocket.broadcaster import RoomPublisher


# Rows 1-5, 6-10, ... so cell (r, c) holds 5 * r + c + 1
ORDERED_BOARD = [[5 * r + c + 1 for c in range(5)] for r in range(5)]
# Same numbers, columns reversed: 1 still sits in row 0 but at column 4
MIRRORED_BOARD = [list(reversed(row)) for row in ORDERED_BOARD]


class RecordingPublisher(RoomPublisher):
    """Keeps every subscription and snapshot instead of sending them."""

    def __init__(self):
        self.subscriptions = []
        self.published = []

    def subscribe(self, room_id, sid):
        self.subscriptions.append((room_id, sid))

    def publish(self, room_id, snapshot):
        self.published.append((room_id, snapshot))

    def published_for(self, room_id):
        return [snapshot for rid, snapshot in self.published if rid == room_id]


@pytest.fixture()
def publisher():
    return RecordingPublisher()


@pytest.fixture()
def registry():
    return RoomRegistry(rng=random.Random(1234))


@pytest.fixture()
def lobby(registry, publisher):
    return LobbyService(registry, publisher)


@pytest.fixture()
def game(registry, publisher):
    return GameService(registry, publisher)


@pytest.fixture()
def seated_room(lobby, registry):
    """Room with P1 = 'sid-1' and P2 = 'sid-2' on known boards."""
    created = lobby.create_room('sid-1')
    lobby.join_room('sid-2', created.room_id)
    room = registry.get_room(created.room_id)
    room.board_p1 = [row[:] for row in ORDERED_BOARD]
    room.board_p2 = [row[:] for row in ORDERED_BOARD]
    return room


@pytest.fixture()
def flask_app():
    application, _ = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _connect():
        test_client = flask_app.socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client()
        )
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
