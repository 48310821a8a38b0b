"""
Grid - rectangular cell storage shared by every board game.

Cells live in a numpy object array:
    None  = empty
    Piece = an occupied cell

All access goes through bounds-checked accessors. Negative indices are
rejected instead of wrapping around, so an out-of-range location can never
be mistaken for an empty cell.

A Grid is not safe for concurrent mutation from several threads; callers
sharing one across threads must synchronize externally.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterator, List, Optional, Union

import numpy as np

from gridgames.core.errors import InvalidDimension, OutOfBounds, ParseError
from gridgames.core.types import InputMode, Location
from gridgames.games.game_rules import board_full, in_bounds

EMPTY = None

_LOCATION_RE = re.compile(r"^(\d+)\s*,\s*(\d+)$", re.ASCII)
_INDEX_RE = re.compile(r"^\d+$", re.ASCII)


class Grid:
    """Fixed-size rows x cols board."""

    __slots__ = ('_cells',)

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._cells = np.full((rows, cols), EMPTY, dtype=object)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    def in_bounds(self, location: Location) -> bool:
        row, col = location
        return in_bounds(self._cells, row, col)

    def _check(self, location) -> Location:
        try:
            row, col = location
        except (TypeError, ValueError) as e:
            raise OutOfBounds(f"Not a location: {location!r}") from e
        # Whole numbers only; 1.9 must not silently become 1
        if not all(isinstance(i, (int, np.integer)) and not isinstance(i, bool) for i in (row, col)):
            raise OutOfBounds(f"Not a location: {location!r}")
        loc = Location(int(row), int(col))
        if not self.in_bounds(loc):
            raise OutOfBounds(f"Location ({loc}) is outside the {self.rows}x{self.cols} grid")
        return loc

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, location: Location) -> Any:
        row, col = self._check(location)
        return self._cells[row, col]

    def set(self, location: Location, cell: Any) -> None:
        row, col = self._check(location)
        self._cells[row, col] = cell

    def move(self, origin: Location, destination: Location, filler: Any = EMPTY) -> Any:
        """
        Relocate whatever occupies `origin` to `destination`.

        Legality is the caller's concern. Both locations are checked before
        anything is touched.

        Returns:
            The previous occupant of `destination` (None if it was empty).
        """
        fr, fc = self._check(origin)
        tr, tc = self._check(destination)

        piece = self._cells[fr, fc]
        self._cells[fr, fc] = filler
        captured = self._cells[tr, tc]
        self._cells[tr, tc] = piece
        return captured

    @property
    def cells(self) -> np.ndarray:
        """Snapshot copy of the cell array."""
        return self._cells.copy()

    def lowest_empty_row(self, col: int) -> Optional[int]:
        """Bottom-most empty row in `col`, or None when the column is full."""
        self._check((0, col))
        for row in range(self.rows - 1, -1, -1):
            if self._cells[row, col] is EMPTY:
                return row
        return None

    def is_full(self) -> bool:
        return board_full(self._cells)

    def locations_of(self, predicate: Callable[[Any], bool]) -> List[Location]:
        """All locations whose cell satisfies `predicate`, in row-major order."""
        return [
            Location(r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if predicate(self._cells[r, c])
        ]

    def __iter__(self) -> Iterator[List[Any]]:
        for row in self._cells:
            yield list(row)

    # ------------------------------------------------------------------
    # Input parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_location(text: str) -> Location:
        """Parse "<row>, <col>" into a Location. Bounds are not checked."""
        match = _LOCATION_RE.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise ParseError(f"Expected '<row>, <col>', got {text!r}")
        return Location(int(match.group(1)), int(match.group(2)))

    @staticmethod
    def parse_index(text: str) -> int:
        """Parse a single non-negative integer. Bounds are not checked."""
        stripped = text.strip() if isinstance(text, str) else ""
        if not _INDEX_RE.match(stripped):
            raise ParseError(f"Expected a single number, got {text!r}")
        return int(stripped)

    def read_input(self, text: str, mode: InputMode = InputMode.FULL) -> Union[Location, int]:
        """
        Parse raw player input under `mode` and check it against the grid.

        Returns a Location for FULL, a row or column index otherwise.

        Raises:
            ParseError: if the text is malformed.
            OutOfBounds: if the parsed value falls outside the grid.
        """
        if mode is InputMode.FULL:
            return self._check(self.parse_location(text))

        index = self.parse_index(text)
        limit = self.rows if mode is InputMode.ROW_ONLY else self.cols
        if index >= limit:
            axis = "row" if mode is InputMode.ROW_ONLY else "column"
            raise OutOfBounds(f"No {axis} {index} in the {self.rows}x{self.cols} grid")
        return index

    def is_well_formed_input(self, text: str, mode: InputMode = InputMode.FULL) -> bool:
        """Format and range check; True exactly when read_input would succeed."""
        try:
            self.read_input(text, mode)
        except (ParseError, OutOfBounds):
            return False
        return True

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render(self, show_row_labels: bool = False, show_col_labels: bool = False) -> str:
        lines = []
        for idx, row in enumerate(self._cells):
            formatted = "".join(f"[{' ' if cell is EMPTY else cell}]" for cell in row)
            lines.append(f"{idx} {formatted}" if show_row_labels else formatted)

        if show_col_labels:
            spacer = "  " if show_row_labels else ""
            lines.append(spacer + "".join(f" {idx} " for idx in range(self.cols)))

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid({self.rows}, {self.cols})"
