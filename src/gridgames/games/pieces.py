"""
Pieces and the movement legality engine.

One Piece class carries a PieceKind tag; per-kind rules are plain
functions looked up from _RULES. Sliding pieces (rook, bishop, queen,
king) share trace_path, which walks the line between two cells one step at
a time.

Legality checks never mutate anything. Piece state (pawn first move,
captures) changes only through Piece.record_move, called once a move has
actually been applied.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from gridgames.core.types import Location, Player

if TYPE_CHECKING:
    from gridgames.games.grid import Grid


class PieceKind(Enum):
    PAWN = "p"
    ROOK = "R"
    KNIGHT = "N"
    BISHOP = "B"
    QUEEN = "Q"
    KING = "K"
    CHIP = "chip"


class Piece:
    """
    A piece on the board.

    Attributes:
        owner: Player the piece belongs to
        kind: PieceKind tag
        alive: False once the piece has been captured
        captures: pieces this piece has taken, oldest first
        forward: row direction a pawn advances in (+1 or -1)
        has_moved: whether the piece has made a move yet
    """

    __slots__ = ('owner', 'kind', 'alive', 'captures', 'forward', 'has_moved')

    def __init__(self, owner: Player, kind: PieceKind, forward: int = 1):
        if forward not in (1, -1):
            raise ValueError(f"forward must be +1 or -1, got {forward}")
        self.owner = owner
        self.kind = kind
        self.alive = True
        self.captures: List["Piece"] = []
        self.forward = forward
        self.has_moved = False

    @property
    def symbol(self) -> str:
        if self.kind is PieceKind.CHIP:
            return self.owner.token
        return self.kind.value

    def is_opponent_of(self, other: Optional["Piece"]) -> bool:
        return other is not None and other.owner != self.owner

    def is_legal_move(self, origin: Location, destination: Location, grid: "Grid") -> bool:
        return is_legal_move(self, origin, destination, grid)

    def record_move(self, captured: Optional["Piece"] = None) -> None:
        """Update piece state after a move has been applied to the grid."""
        self.has_moved = True
        if captured is not None:
            self.capture(captured)

    def capture(self, other: "Piece") -> None:
        self.captures.append(other)
        other.alive = False

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Piece({self.kind.name}, owner={self.owner.name!r})"


# ---------------------------------------------------------------------------
# Path tracing
# ---------------------------------------------------------------------------

def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def trace_path(piece: Piece, origin: Location, destination: Location, grid: "Grid") -> bool:
    """
    Walk from `origin` towards `destination` in unit steps.

    Returns True iff every intermediate cell is empty and the destination
    is either empty or held by an opponent. The caller guarantees the two
    cells share a row, a column or a diagonal.
    """
    d_row = _sign(destination[0] - origin[0])
    d_col = _sign(destination[1] - origin[1])

    row, col = origin[0] + d_row, origin[1] + d_col
    while (row, col) != (destination[0], destination[1]):
        if grid.get((row, col)) is not None:
            return False
        row += d_row
        col += d_col

    target = grid.get(destination)
    return target is None or piece.is_opponent_of(target)


def _deltas(origin: Location, destination: Location) -> tuple[int, int]:
    return destination[0] - origin[0], destination[1] - origin[1]


def clear_diagonal_path(piece: Piece, origin: Location, destination: Location, grid: "Grid") -> bool:
    dr, dc = _deltas(origin, destination)
    return abs(dr) == abs(dc) and trace_path(piece, origin, destination, grid)


def clear_horizontal_path(piece: Piece, origin: Location, destination: Location, grid: "Grid") -> bool:
    dr, _ = _deltas(origin, destination)
    return dr == 0 and trace_path(piece, origin, destination, grid)


def clear_vertical_path(piece: Piece, origin: Location, destination: Location, grid: "Grid") -> bool:
    _, dc = _deltas(origin, destination)
    return dc == 0 and trace_path(piece, origin, destination, grid)


# ---------------------------------------------------------------------------
# Per-kind rules
# ---------------------------------------------------------------------------

def _rook(piece, origin, destination, grid) -> bool:
    return (clear_horizontal_path(piece, origin, destination, grid)
            or clear_vertical_path(piece, origin, destination, grid))


def _bishop(piece, origin, destination, grid) -> bool:
    return clear_diagonal_path(piece, origin, destination, grid)


def _queen(piece, origin, destination, grid) -> bool:
    return (clear_diagonal_path(piece, origin, destination, grid)
            or clear_horizontal_path(piece, origin, destination, grid)
            or clear_vertical_path(piece, origin, destination, grid))


def _king(piece, origin, destination, grid) -> bool:
    dr, dc = _deltas(origin, destination)
    if max(abs(dr), abs(dc)) != 1:
        return False
    return _queen(piece, origin, destination, grid)


def _knight(piece, origin, destination, grid) -> bool:
    dr, dc = _deltas(origin, destination)
    if (abs(dr), abs(dc)) not in ((2, 1), (1, 2)):
        return False
    target = grid.get(destination)
    return target is None or piece.is_opponent_of(target)


def _pawn(piece, origin, destination, grid) -> bool:
    dr, dc = _deltas(origin, destination)
    fwd = piece.forward
    target = grid.get(destination)

    if dc == 0:
        if target is not None:
            return False
        if dr == fwd:
            return True
        # Double step: only before the first move, over an empty cell
        if dr == 2 * fwd and not piece.has_moved:
            return grid.get((origin[0] + fwd, origin[1])) is None
        return False

    if abs(dc) == 1 and dr == fwd:
        return piece.is_opponent_of(target)

    return False


def _chip(piece, origin, destination, grid) -> bool:
    return False


_RULES: Dict[PieceKind, Callable[[Piece, Location, Location, "Grid"], bool]] = {
    PieceKind.PAWN: _pawn,
    PieceKind.ROOK: _rook,
    PieceKind.KNIGHT: _knight,
    PieceKind.BISHOP: _bishop,
    PieceKind.QUEEN: _queen,
    PieceKind.KING: _king,
    PieceKind.CHIP: _chip,
}


def is_legal_move(piece: Piece, origin: Location, destination: Location, grid: "Grid") -> bool:
    """
    Check whether `piece` standing on `origin` may move to `destination`.

    Out-of-bounds locations and zero-length moves are never legal.
    """
    if not (grid.in_bounds(origin) and grid.in_bounds(destination)):
        return False
    if tuple(origin) == tuple(destination):
        return False
    return _RULES[piece.kind](piece, origin, destination, grid)
