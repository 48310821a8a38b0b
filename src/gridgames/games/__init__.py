"""
Games module - grid, pieces, rules, session and game implementations.
"""

from gridgames.games.grid import Grid, EMPTY
from gridgames.games.game_rules import (
    in_bounds,
    board_full,
    get_rows,
    get_cols,
    get_diagonals,
    align_diagonally,
    has_consecutive,
)
from gridgames.games.pieces import Piece, PieceKind, is_legal_move, trace_path
from gridgames.games.game_base import GameBase, Move
from gridgames.games.session import Session, Step, Phase, TurnCycling
from gridgames.games.chess import Chess
from gridgames.games.connect_four import ConnectFour

__all__ = [
    "Grid",
    "EMPTY",
    "Piece",
    "PieceKind",
    "GameBase",
    "Move",
    "Session",
    "Step",
    "Phase",
    "TurnCycling",
    "Chess",
    "ConnectFour",
    "in_bounds",
    "board_full",
    "get_rows",
    "get_cols",
    "get_diagonals",
    "align_diagonally",
    "has_consecutive",
    "is_legal_move",
    "trace_path",
]
