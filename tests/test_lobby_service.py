import re

import pytest

from bingo_server.models import Role
from bingo_server.services import RoomNotFound

from conftest import ORDERED_BOARD


def test_create_room_seats_creator_as_first_player(lobby, registry, publisher):
    result = lobby.create_room('sid-1')

    assert re.fullmatch(r'[A-Z0-9]{6}', result.room_id)
    assert result.role is Role.FIRST_PLAYER
    assert result.state.turn is Role.FIRST_PLAYER
    assert result.state.finished is False
    assert result.state.players == {'P1': True, 'P2': False, 'spectators': 0}
    assert result.room_id in registry
    assert publisher.subscriptions == [(result.room_id, 'sid-1')]


def test_room_ids_are_unique(lobby):
    ids = {lobby.create_room(f'sid-{i}').room_id for i in range(50)}
    assert len(ids) == 50


def test_second_player_then_spectators(lobby, publisher):
    room_id = lobby.create_room('sid-1').room_id

    second = lobby.join_room('sid-2', room_id)
    assert second.role is Role.SECOND_PLAYER
    # Everyone is told a new player arrived
    assert publisher.published_for(room_id)[-1].players == {'P1': True, 'P2': True, 'spectators': 0}

    published = len(publisher.published)
    third = lobby.join_room('sid-3', room_id)
    fourth = lobby.join_room('sid-4', room_id)
    assert third.role is Role.SPECTATOR
    assert fourth.role is Role.SPECTATOR
    assert fourth.state.players['spectators'] == 2
    assert len(publisher.published) == published
    assert (room_id, 'sid-4') in publisher.subscriptions


def test_unknown_room(lobby):
    with pytest.raises(RoomNotFound):
        lobby.join_room('sid-1', 'NOPE00')


def test_rejoin_on_same_connection_keeps_seat(lobby, game, publisher):
    room_id = lobby.create_room('sid-1').room_id
    lobby.join_room('sid-2', room_id)
    game.select_number(room_id, Role.FIRST_PLAYER, 1, sid='sid-1')

    published = len(publisher.published)
    again = lobby.join_room('sid-2', room_id)

    assert again.role is Role.SECOND_PLAYER
    assert again.state.turn is Role.SECOND_PLAYER
    assert len(publisher.published) == published


def test_player_drop_keeps_game_and_frees_seat(lobby, game, seated_room, publisher):
    room_id = seated_room.room_id
    lobby.join_room('watcher', room_id)
    game.select_number(room_id, Role.FIRST_PLAYER, 1, sid='sid-1')
    before = game.get_room_state(room_id)

    assert lobby.handle_disconnect('sid-1') == [room_id]

    pushed = publisher.published_for(room_id)[-1]
    assert pushed.players == {'P1': False, 'P2': True, 'spectators': 1}

    replacement = lobby.join_room('sid-new', room_id)
    assert replacement.role is Role.FIRST_PLAYER
    assert replacement.state.board_p1 == before.board_p1
    assert replacement.state.board_p2 == before.board_p2
    assert replacement.state.marked_p1 == before.marked_p1
    assert replacement.state.turn is Role.SECOND_PLAYER


def test_spectator_is_promoted_into_vacant_seat(lobby, seated_room):
    room_id = seated_room.room_id
    lobby.join_room('watcher', room_id)
    lobby.handle_disconnect('sid-2')

    result = lobby.join_room('watcher', room_id)

    assert result.role is Role.SECOND_PLAYER
    assert result.state.players == {'P1': True, 'P2': True, 'spectators': 0}


def test_last_participant_leaving_deletes_room(lobby, game, registry, seated_room):
    room_id = seated_room.room_id
    lobby.join_room('watcher', room_id)

    lobby.handle_disconnect('sid-1')
    lobby.handle_disconnect('sid-2')
    assert room_id in registry

    lobby.handle_disconnect('watcher')

    assert room_id not in registry
    assert seated_room.closed is True
    with pytest.raises(RoomNotFound):
        lobby.join_room('sid-9', room_id)
    with pytest.raises(RoomNotFound):
        game.select_number(room_id, Role.FIRST_PLAYER, 1)
    assert game.restart_game(room_id) is None


def test_deleted_room_is_not_published(lobby, publisher):
    room_id = lobby.create_room('solo').room_id
    published = len(publisher.published)
    lobby.handle_disconnect('solo')
    assert len(publisher.published) == published


def test_disconnect_from_several_rooms(lobby, registry):
    first = lobby.create_room('host-a').room_id
    second = lobby.create_room('host-b').room_id
    lobby.join_room('roamer', first)
    lobby.join_room('roamer', second)

    assert sorted(lobby.handle_disconnect('roamer')) == sorted([first, second])
    assert first in registry and second in registry


def test_disconnect_of_unknown_connection(lobby):
    lobby.create_room('sid-1')
    assert lobby.handle_disconnect('stranger') == []


def test_registry_lifecycle(registry):
    room = registry.create_room()
    assert registry.get_room(room.room_id) is room
    assert registry.require_room(room.room_id) is room
    assert registry.room_ids() == [room.room_id]
    assert len(registry) == 1

    assert registry.delete_room(room.room_id) is True
    assert registry.delete_room(room.room_id) is False
    assert registry.get_room(room.room_id) is None
    with pytest.raises(RoomNotFound):
        registry.require_room(room.room_id)


def test_deleted_room_is_closed(registry):
    room = registry.create_room()
    registry.delete_room(room.room_id)

    assert room.closed is True
    with pytest.raises(RoomNotFound):
        with registry.locked_room(room.room_id):
            pass


def test_closed_room_refuses_callers_that_looked_it_up_earlier(registry, monkeypatch):
    room = registry.create_room()
    monkeypatch.setattr(registry, "require_room", lambda room_id: room)
    registry.delete_room(room.room_id)

    with pytest.raises(RoomNotFound):
        with registry.locked_room(room.room_id):
            pass
    assert not room.lock.locked()


def test_fixture_boards_are_in_place(seated_room):
    assert seated_room.board_p1 == ORDERED_BOARD
