"""
Chess implementation.

Board (8x8), player 1 at the top:
    row 0 = R N B Q K B N R   (player 1)
    row 1 = pawns             (player 1, advancing +1)
    row 6 = pawns             (player 2, advancing -1)
    row 7 = mirrored back row (player 2)

Capturing the opposing King wins. No check, castling, en passant or
promotion.
"""

from __future__ import annotations

from typing import Optional

from gridgames.core.errors import InvalidDestination
from gridgames.core.types import Location, Player
from gridgames.games.game_base import GameBase, Move
from gridgames.games.pieces import Piece, PieceKind

BACK_ROW = (
    PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
    PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
)


class Chess(GameBase):
    """Two-player chess, won by taking the King."""

    ROWS = 8
    COLS = 8
    SHOW_ROW_LABELS = True
    SHOW_COL_LABELS = True

    display_name = "Chess"
    instructions = (
        "You can select spots on the board by inputting the row and column "
        "with a comma in between. See example below\n1, 1\n"
    )

    def game_id(self) -> str:
        return "chess"

    def setup(self) -> None:
        player1, player2 = self.players
        last = self.ROWS - 1

        for col in range(self.COLS):
            self.grid.set((1, col), Piece(player1, PieceKind.PAWN, forward=1))
            self.grid.set((last - 1, col), Piece(player2, PieceKind.PAWN, forward=-1))

        for idx, kind in enumerate(BACK_ROW):
            self.grid.set((0, idx), Piece(player1, kind))
            self.grid.set((last, last - idx), Piece(player2, kind))

    def play(self, origin: Optional[Location], target: Location, player: Player) -> Move:
        if origin is None:
            raise InvalidDestination("Select a piece before choosing a destination")

        piece = self.select_piece(origin, player)
        if not piece.is_legal_move(origin, target, self.grid):
            raise InvalidDestination(f"{piece} cannot move from ({origin}) to ({target})")

        captured = self.grid.move(origin, target)
        piece.record_move(captured)
        return Move(player, Location(*origin), Location(*target), piece, captured)

    def is_winning_move(self, move: Move) -> bool:
        return move.captured is not None and move.captured.kind is PieceKind.KING
