"""
Factory functions for creating players, games and sessions.
"""

from typing import List, Optional, Sequence

from gridgames.core.types import Player
from gridgames.games.game_base import GameBase
from gridgames.games.session import Session
from gridgames.utils.config import GAMES, Config


def create_players(
    names: Sequence[str],
    markers: Optional[Sequence[str]] = None,
) -> List[Player]:
    """
    Create one player per name, with IDs starting at 1.

    Args:
        names: Display names in turn order
        markers: Optional display tokens, one per name

    Returns:
        List of players in turn order
    """
    if markers is not None and len(markers) != len(names):
        raise ValueError(f"Got {len(markers)} markers for {len(names)} players")

    return [
        Player(id=idx + 1, name=name, marker=markers[idx] if markers else None)
        for idx, name in enumerate(names)
    ]


def create_game(game_name: str, players: Sequence[Player]) -> GameBase:
    """
    Create a game instance with its initial placement.

    Args:
        game_name: Key from GAMES registry (e.g., "chess")
        players: Players in turn order

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name](players)


def create_session(config: Config) -> Session:
    """Build players, game and session from a Config."""
    players = create_players(config.player_names, config.markers)
    game = create_game(config.game_name, players)
    return Session(game)
