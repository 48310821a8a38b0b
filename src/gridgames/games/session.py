"""
Session - the turn state machine that drives one game from setup to a result.

Phases:
    AWAITING_PIECE        player picks one of their pieces
    AWAITING_DESTINATION  player picks where it goes ("back" to reselect)
    GAME_OVER             terminal; winner set, or a draw

A turn: select piece -> select destination -> apply -> win check -> advance.
Games without piece selection (connect-four) start every turn at
AWAITING_DESTINATION.

The session never reads or prints anything. A collaborator feeds it raw
lines through submit() and shows the returned messages. Sessions are not
safe for concurrent use from several threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Tuple

from gridgames.core.errors import (
    ExitRequested,
    GameOverError,
    InputError,
    InvalidDestination,
    InvalidPieceSelection,
    ParseError,
)
from gridgames.core.types import BACK, EXIT, Location, Player
from gridgames.games.game_base import GameBase, Move

logger = logging.getLogger(__name__)

FORMAT_ERROR = "Input is in the wrong format or out of bounds. Try again"
PIECE_ERROR = "Invalid piece. Try again"
DESTINATION_ERROR = "Invalid destination. Try again"


class Phase(Enum):
    AWAITING_PIECE = auto()
    AWAITING_DESTINATION = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Step:
    """Outcome of one submitted line."""

    accepted: bool
    message: str = ""
    move: Optional[Move] = None


class TurnCycling:
    """Cyclic turn order over a fixed sequence of players."""

    __slots__ = ('players', 'index')

    def __init__(self, players: Sequence[Player], start: int = 0):
        if not players:
            raise ValueError("At least one player is required")
        self.players: Tuple[Player, ...] = tuple(players)
        self.index = start % len(self.players)

    @property
    def current(self) -> Player:
        return self.players[self.index]

    def advance(self) -> Player:
        self.index = (self.index + 1) % len(self.players)
        return self.current


def _message_for(error: InputError) -> str:
    if isinstance(error, InvalidPieceSelection):
        return PIECE_ERROR
    if isinstance(error, InvalidDestination):
        return DESTINATION_ERROR
    return FORMAT_ERROR


class Session:
    """One game in progress."""

    def __init__(self, game: GameBase, first_player: Optional[Player] = None):
        self.game = game
        start = game.players.index(first_player) if first_player is not None else 0
        self.turns = TurnCycling(game.players, start)
        self.winner: Optional[Player] = None
        self.selected: Optional[Location] = None
        self.moves_played = 0
        self.phase = self._turn_start()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def players(self) -> Tuple[Player, ...]:
        return self.turns.players

    @property
    def current_player(self) -> Player:
        return self.turns.current

    @property
    def current_turn_index(self) -> int:
        return self.turns.index

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.winner is None

    def _turn_start(self) -> Phase:
        return Phase.AWAITING_PIECE if self.game.SELECTS_PIECE else Phase.AWAITING_DESTINATION

    def prompt(self) -> str:
        """Text asking the current player for their next input."""
        if self.phase is Phase.GAME_OVER:
            return f"{self.winner} wins!" if self.winner else "It's a draw!"

        if self.phase is Phase.AWAITING_DESTINATION and self.selected is not None:
            piece = self.game.grid.get(self.selected)
            return f'Select where to move "{piece}" to. Type "{BACK}" to reselect piece'

        return f"{self.current_player}'s turn\n{self.game.move_prompt}"

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def submit(self, text: str) -> Step:
        """
        Feed one line of player input to the state machine.

        Rejected input leaves the state untouched and returns a Step with
        accepted=False and a message to show before re-prompting.

        Raises:
            ExitRequested: if the player typed "exit".
            GameOverError: if the session has already ended.
        """
        if self.phase is Phase.GAME_OVER:
            raise GameOverError("Cannot play: the game is already over.")

        text = text.strip()
        if text == EXIT:
            logger.info("%s left %s", self.current_player, self.game.game_id())
            raise ExitRequested(f"{self.current_player} exited the game")

        try:
            if self.phase is Phase.AWAITING_PIECE:
                return self._select_piece(text)
            return self._select_destination(text)
        except InputError as e:
            logger.debug("Rejected %r from %s: %s", text, self.current_player, e)
            return Step(False, _message_for(e))

    def _select_piece(self, text: str) -> Step:
        location = self.game.read_input(text)
        self.game.select_piece(location, self.current_player)
        self.selected = location
        self.phase = Phase.AWAITING_DESTINATION
        return Step(True)

    def _select_destination(self, text: str) -> Step:
        if text == BACK:
            if not self.game.SELECTS_PIECE:
                raise ParseError(f"'{BACK}' is only available after selecting a piece")
            self.selected = None
            self.phase = Phase.AWAITING_PIECE
            return Step(True)

        target = self.game.read_input(text)
        move = self.game.play(self.selected, target, self.current_player)
        return self._finish(move)

    def _finish(self, move: Move) -> Step:
        self.moves_played += 1
        self.selected = None
        logger.info(
            "%s: %s put %s on (%s)%s",
            self.game.game_id(),
            move.player,
            move.piece,
            move.destination,
            f", capturing {move.captured!r}" if move.captured is not None else "",
        )

        if self.game.is_winning_move(move):
            self.winner = move.player
            self.phase = Phase.GAME_OVER
            logger.info("%s won %s after %d moves", self.winner, self.game.game_id(), self.moves_played)
            return Step(True, f"{self.winner} wins!", move)

        if self.game.is_draw():
            self.phase = Phase.GAME_OVER
            logger.info("%s ended in a draw after %d moves", self.game.game_id(), self.moves_played)
            return Step(True, "It's a draw!", move)

        self.turns.advance()
        self.phase = self._turn_start()
        return Step(True, "", move)
