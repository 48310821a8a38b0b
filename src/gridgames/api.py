"""
Public API for playing grid games.

Usage:
    from gridgames import Config, create_session, play_session

    session = create_session(Config(game_name="connect_four"))
    winner = play_session(session)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from gridgames.core.errors import ExitRequested
from gridgames.core.types import Player
from gridgames.games.session import Session, Step, Phase
from gridgames.utils.config import Config, GAMES
from gridgames.utils.factory import create_game, create_players, create_session

logger = logging.getLogger(__name__)


def _player_turn(
    session: Session,
    read_line: Callable[[], str],
    write: Callable[[str], None],
) -> Step:
    """Prompt until one input is accepted, return the accepted step."""
    write(session.prompt())
    while True:
        step = session.submit(read_line())
        if step.accepted:
            return step
        write(step.message)


def play_session(
    session: Session,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> Optional[Player]:
    """
    Main entry point: drive a session until it ends.

    Parameters
    ----------
    session : Session
        The session to play.
    read_line : Callable[[], str]
        Returns the next line of player input.
    write : Callable[[str], None]
        Shows text to the players.

    Returns
    -------
    The winning player, or None on a draw or when a player exits.
    """
    write(session.game.state_string())

    try:
        while not session.is_over:
            step = _player_turn(session, read_line, write)
            if step.move is not None:
                write(session.game.state_string())
            if step.message:
                write(step.message)

    except (ExitRequested, EOFError):
        write("Exiting game")
        return None
    except KeyboardInterrupt:
        write("\nInterrupted - shutting down...")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return session.winner


__all__ = [
    "play_session",
    "create_session",
    "create_game",
    "create_players",
    "Config",
    "GAMES",
    "Session",
    "Phase",
]
