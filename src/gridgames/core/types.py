"""
Core types shared by the grid, the pieces and the session.

- Location: zero-based (row, col) pair
- Player: immutable participant record
- InputMode: which coordinates a game reads from the player
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional


class Location(NamedTuple):
    """Zero-based grid coordinate."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row}, {self.col}"


class InputMode(Enum):
    FULL = auto()      # "<row>, <col>"
    ROW_ONLY = auto()  # "<row>"
    COL_ONLY = auto()  # "<col>"


@dataclass(frozen=True)
class Player:
    """
    A participant in a session.

    `marker` is an optional short display token; when absent the player's
    name is used wherever the player is drawn on the board.
    """

    id: int
    name: str
    marker: Optional[str] = None

    @property
    def token(self) -> str:
        return self.marker if self.marker else self.name

    def __str__(self) -> str:
        return self.name


# Reserved input tokens
BACK = "back"
EXIT = "exit"
