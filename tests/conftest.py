"""
Shared test fixtures for gridgames tests.

Design principles:
- Game-agnostic fixtures where possible
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, Iterable, List, Tuple

import pytest

from gridgames.core.types import Player
from gridgames.games.chess import Chess
from gridgames.games.connect_four import ConnectFour
from gridgames.games.grid import Grid
from gridgames.games.session import Session


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def alice() -> Player:
    return Player(1, "Alice")


@pytest.fixture
def bob() -> Player:
    return Player(2, "Bob")


@pytest.fixture
def players(alice: Player, bob: Player) -> List[Player]:
    return [alice, bob]


# =============================================================================
# Grid / Game Fixtures
# =============================================================================

@pytest.fixture
def grid() -> Grid:
    """Empty 8x8 grid."""
    return Grid(8, 8)


@pytest.fixture
def chess(players: List[Player]) -> Chess:
    """Chess in its starting position."""
    return Chess(players)


@pytest.fixture
def empty_chess(players: List[Player]) -> Chess:
    """Chess with every piece removed, for hand-built positions."""
    game = Chess(players)
    game.grid = Grid(game.ROWS, game.COLS)
    return game


@pytest.fixture
def connect_four(players: List[Player]) -> ConnectFour:
    return ConnectFour(players)


@pytest.fixture
def chess_session(chess: Chess) -> Session:
    return Session(chess)


@pytest.fixture
def connect_four_session(connect_four: ConnectFour) -> Session:
    return Session(connect_four)


# =============================================================================
# Collaborator Fixtures
# =============================================================================

def scripted_input(lines: Iterable[str]) -> Callable[[], str]:
    """read_line() replacement that raises EOFError once `lines` run out."""
    it = iter(lines)

    def read_line() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def console() -> Tuple[List[str], Callable[[str], None]]:
    """Captured output lines and the write() that appends to them."""
    out: List[str] = []
    return out, out.append


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Factory for scripted read_line() callables."""
    return scripted_input
