"""
Tests for gridgames.utils.factory

Tests factory functions for creating players, games and sessions.
"""

import pytest

from gridgames.games.game_base import GameBase
from gridgames.games.session import Phase, Session
from gridgames.utils.config import GAMES, Config
from gridgames.utils.factory import create_game, create_players, create_session


class TestCreatePlayers:
    """create_players function tests."""

    def test_ids_start_at_one(self):
        players = create_players(["Ann", "Bo"])
        assert [p.id for p in players] == [1, 2]
        assert [p.name for p in players] == ["Ann", "Bo"]

    def test_markers_assigned_in_order(self):
        players = create_players(["Ann", "Bo"], markers=["X", "O"])
        assert [p.token for p in players] == ["X", "O"]

    def test_players_are_distinct(self):
        a, b = create_players(["Same", "Same"])
        assert a != b

    def test_marker_count_mismatch_raises(self):
        with pytest.raises(ValueError):
            create_players(["Ann", "Bo"], markers=["X"])


class TestCreateGame:
    """create_game function tests."""

    def test_creates_game_instance(self):
        players = create_players(["Ann", "Bo"])
        for game_name in GAMES:
            game = create_game(game_name, players)
            assert isinstance(game, GameBase)
            assert game.players == tuple(players)

    def test_unknown_game_raises(self):
        with pytest.raises(ValueError, match="Unknown game"):
            create_game("checkers", create_players(["Ann", "Bo"]))


class TestCreateSession:
    """create_session function tests."""

    def test_session_is_playable(self):
        for game_name in GAMES:
            session = create_session(Config(game_name=game_name))
            assert isinstance(session, Session)
            assert session.current_player.name == "Player 1"
            assert session.phase is not Phase.GAME_OVER

    def test_session_uses_config_names(self):
        session = create_session(Config(game_name="connect_four", player_names=["Ann", "Bo"]))
        assert str(session.game) == "Connect-Four between Ann and Bo"
