"""
Connect-Four implementation.

6x7 board. A turn is a single column number; the chip falls to the lowest
empty cell of that column. Four of a player's chips in a row, column or
diagonal win. A full board without a winner is a draw.
"""

from __future__ import annotations

from typing import Optional

from gridgames.core.errors import InvalidDestination
from gridgames.core.types import InputMode, Location, Player
from gridgames.games.game_base import GameBase, Move
from gridgames.games.game_rules import has_consecutive
from gridgames.games.pieces import Piece, PieceKind

WIN_LENGTH = 4


class ConnectFour(GameBase):
    """Two-player Connect-Four."""

    ROWS = 6
    COLS = 7
    INPUT_MODE = InputMode.COL_ONLY
    SELECTS_PIECE = False
    SHOW_COL_LABELS = True

    display_name = "Connect-Four"
    instructions = (
        "You can select which column to drop your chip into by typing in "
        "the column number.\n"
    )
    move_prompt = "Choose a column to drop your chip in"

    def game_id(self) -> str:
        return "connect_four"

    def setup(self) -> None:
        pass  # Starts empty

    def drop_chip(self, col: int, player: Player) -> Move:
        """
        Drop a chip for `player` into `col`.

        Raises:
            InvalidDestination: if the column is full.
        """
        row = self.grid.lowest_empty_row(col)
        if row is None:
            raise InvalidDestination(f"Column {col} is full")

        chip = Piece(player, PieceKind.CHIP)
        destination = Location(row, col)
        self.grid.set(destination, chip)
        chip.record_move()
        return Move(player, None, destination, chip)

    def play(self, origin: Optional[Location], target: int, player: Player) -> Move:
        return self.drop_chip(int(target), player)

    def is_winning_move(self, move: Move) -> bool:
        return has_consecutive(self.grid.cells, WIN_LENGTH)

    def is_draw(self) -> bool:
        return self.grid.is_full()
