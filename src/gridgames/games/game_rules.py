"""
NumPy utilities for grid games.

Line extraction and k-in-a-row detection over object boards where None
marks an empty cell. All functions take a 2D array snapshot and never
mutate it.
"""

from __future__ import annotations

from itertools import groupby
from typing import Any, Iterable, List

import numpy as np


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def board_full(board: np.ndarray) -> bool:
    """
    Return True if the board has no None values.
    Python-level scan is fastest for None checks.
    """
    return all(x is not None for x in board.flat)


def line_key(cell: Any) -> Any:
    """
    Value used to compare cells along a line.

    Pieces compare by owner, so two pieces of one player continue a run
    whatever their kind. Anything else compares by value.
    """
    if cell is None:
        return None
    return getattr(cell, "owner", cell)


def _keys(board: np.ndarray) -> np.ndarray:
    keys = np.empty(board.shape, dtype=object)
    for idx, cell in np.ndenumerate(board):
        keys[idx] = line_key(cell)
    return keys


def get_rows(board: np.ndarray) -> List[np.ndarray]:
    """Rows, copied to avoid shared memory with the board."""
    return [row.copy() for row in board]


def get_cols(board: np.ndarray) -> List[np.ndarray]:
    """Columns via board.T, each copied."""
    return [col.copy() for col in board.T]


def align_diagonally(board: np.ndarray) -> np.ndarray:
    """
    Shear the board so its diagonals become columns.

    Row i of an n-row board is prefixed with n-1-i empty cells and suffixed
    with i empty cells. A cell (r, c) lands in column c + n-1-r, so every
    cell on one top-left to bottom-right diagonal shares a column.
    """
    n, m = board.shape
    sheared = np.full((n, m + n - 1), None, dtype=object)
    for i in range(n):
        left = n - 1 - i
        sheared[i, left:left + m] = board[i]
    return sheared


def get_diagonals(board: np.ndarray) -> List[np.ndarray]:
    """
    Every diagonal in both directions, padding included.

    The first half are the top-left to bottom-right diagonals, the second
    half the top-right to bottom-left ones (taken from the flipped board).
    """
    major = align_diagonally(board)
    minor = align_diagonally(np.flipud(board))
    return get_cols(major) + get_cols(minor)


def longest_run(line: Iterable[Any]) -> int:
    """Length of the longest run of equal, non-empty values in `line`."""
    best = 0
    for value, group in groupby(line):
        if value is None:
            continue
        best = max(best, sum(1 for _ in group))
    return best


def has_consecutive(
    board: np.ndarray,
    k: int,
    check_rows: bool = True,
    check_cols: bool = True,
    check_diagonals: bool = True,
) -> bool:
    """
    Return True if `k` equal, non-empty cells line up in any enabled direction.

    Works for any board shape and any k. Runs are found by grouping equal
    neighbours along each line, after mapping pieces to their owner.
    `board` may also be a Grid, whose cell snapshot is scanned.
    """
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")

    board = np.asarray(getattr(board, "cells", board), dtype=object)
    if board.ndim != 2:
        raise TypeError(f"Expected a 2D board, got {board.ndim} dimensions")
    keys = _keys(board)

    lines: List[np.ndarray] = []
    if check_rows:
        lines.extend(get_rows(keys))
    if check_cols:
        lines.extend(get_cols(keys))
    if check_diagonals:
        lines.extend(get_diagonals(keys))

    return any(longest_run(line) >= k for line in lines)
