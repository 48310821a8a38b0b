"""
gridgames - a small engine for turn-based, two-player grid games.

Quick Start:
    from gridgames import Config, create_session, play_session

    session = create_session(Config(game_name="chess", player_names=["Ann", "Bo"]))
    play_session(session)

Modules:
    core   - Location, Player, InputMode and the error taxonomy
    games  - Grid, alignment scanner, pieces, session, Chess and ConnectFour
    utils  - Game registry, configuration and factories
"""

from gridgames.api import (
    play_session,
    create_session,
    create_game,
    create_players,
    Config,
    GAMES,
)

from gridgames.core import Location, Player, InputMode
from gridgames.games import Grid, Session, Chess, ConnectFour, has_consecutive

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_session",
    "create_session",
    "create_game",
    "create_players",
    "Config",
    "GAMES",
    # Types
    "Location",
    "Player",
    "InputMode",
    "Grid",
    "Session",
    "Chess",
    "ConnectFour",
    "has_consecutive",
]
