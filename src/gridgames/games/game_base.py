"""
GameBase - abstract base class for all grid games.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from gridgames.core.errors import InvalidPieceSelection
from gridgames.core.types import InputMode, Location, Player
from gridgames.games.grid import Grid
from gridgames.games.pieces import Piece


@dataclass(frozen=True)
class Move:
    """A move that has been applied to the grid."""

    player: Player
    origin: Optional[Location]
    destination: Location
    piece: Piece
    captured: Optional[Piece] = None


class GameBase(ABC):
    """
    Abstract base class for all grid games.

    ARCHITECTURE NOTE:
    ------------------
    - A game owns its Grid and knows its own rules.
    - A game does NOT know whose turn it is. Turn order, piece selection
      and the winner live on the Session that drives the game.

    Subclasses configure the board through class attributes and implement
    setup(), play() and is_winning_move().
    """

    ROWS: int
    COLS: int
    NUM_PLAYERS = 2
    INPUT_MODE = InputMode.FULL
    SELECTS_PIECE = True  # False: a turn is a single destination input
    SHOW_ROW_LABELS = False
    SHOW_COL_LABELS = False

    display_name = "boardgame"
    instructions = ""
    move_prompt = "Select your piece"

    def __init__(self, players: Sequence[Player]):
        if len(players) != self.NUM_PLAYERS:
            raise ValueError(
                f"{self.display_name} needs {self.NUM_PLAYERS} players, got {len(players)}"
            )
        self.players: Tuple[Player, ...] = tuple(players)
        self.grid = Grid(self.ROWS, self.COLS)
        self.setup()

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'chess')."""
        pass

    def num_players(self) -> int:
        return self.NUM_PLAYERS

    @abstractmethod
    def setup(self) -> None:
        """Place the initial pieces on self.grid."""
        pass

    def read_input(self, text: str) -> Union[Location, int]:
        """Parse and bounds-check player input in this game's input mode."""
        return self.grid.read_input(text, self.INPUT_MODE)

    def is_well_formed_input(self, text: str) -> bool:
        return self.grid.is_well_formed_input(text, self.INPUT_MODE)

    def select_piece(self, location: Location, player: Player) -> Piece:
        """
        Return the piece at `location` if `player` may move it.

        Raises:
            InvalidPieceSelection: if the cell is empty or not the player's.
        """
        piece = self.grid.get(location)
        if piece is None:
            raise InvalidPieceSelection(f"No piece at ({location})")
        if piece.owner != player:
            raise InvalidPieceSelection(f"The piece at ({location}) belongs to {piece.owner}")
        return piece

    @abstractmethod
    def play(self, origin: Optional[Location], target: Union[Location, int], player: Player) -> Move:
        """
        Validate and apply a move. Mutates the grid.

        Args:
            origin: Selected piece location (None for games without
                    piece selection).
            target: Parsed destination from read_input().
            player: The player moving.

        Raises:
            InvalidDestination: if the move breaks the game's rules.
        """
        pass

    @abstractmethod
    def is_winning_move(self, move: Move) -> bool:
        """
        Return True if the board is won once `move` has been applied.

        Games may inspect only `move` (chess: was a King taken) or the whole
        board (connect-four: does any run of four exist).
        """
        pass

    def is_draw(self) -> bool:
        """Return True if the game ended without a winner."""
        return False

    def state_string(self) -> str:
        return self.grid.render(
            show_row_labels=self.SHOW_ROW_LABELS,
            show_col_labels=self.SHOW_COL_LABELS,
        )

    def __str__(self) -> str:
        names = " and ".join(str(p) for p in self.players)
        return f"{self.display_name} between {names}"
