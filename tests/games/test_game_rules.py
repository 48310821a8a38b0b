"""
Tests for gridgames.games.game_rules

Tests line extraction, the diagonal shear and k-in-a-row detection.
"""

import numpy as np
import pytest

from gridgames.games.game_rules import (
    align_diagonally,
    board_full,
    get_cols,
    get_diagonals,
    get_rows,
    has_consecutive,
    in_bounds,
    line_key,
    longest_run,
)
from gridgames.games.grid import Grid
from gridgames.games.pieces import Piece, PieceKind


def empty(rows: int, cols: int) -> np.ndarray:
    return np.full((rows, cols), None, dtype=object)


def place(board: np.ndarray, cells, value="X") -> np.ndarray:
    for r, c in cells:
        board[r, c] = value
    return board


# ---------------------------------------------------------
# Line extraction
# ---------------------------------------------------------
class TestLineExtraction:
    def test_in_bounds(self):
        board = empty(3, 4)
        assert in_bounds(board, 0, 0)
        assert in_bounds(board, 2, 3)
        assert not in_bounds(board, -1, 0)
        assert not in_bounds(board, 3, 0)
        assert not in_bounds(board, 0, 4)

    def test_board_full(self):
        board = np.array([["X", "O"], ["O", None]], dtype=object)
        assert not board_full(board)
        board[1, 1] = "X"
        assert board_full(board)

    def test_get_rows(self):
        board = np.array([[1, 2], [3, 4]], dtype=object)
        rows = get_rows(board)
        assert len(rows) == 2
        assert np.array_equal(rows[1], np.array([3, 4], dtype=object))

    def test_get_cols(self):
        board = np.array([[1, 2], [3, 4]], dtype=object)
        cols = get_cols(board)
        assert np.array_equal(cols[0], np.array([1, 3], dtype=object))
        assert np.array_equal(cols[1], np.array([2, 4], dtype=object))

    def test_rows_are_copies(self):
        board = np.array([[1, 2]], dtype=object)
        get_rows(board)[0][0] = 99
        assert board[0, 0] == 1


# ---------------------------------------------------------
# Shear
# ---------------------------------------------------------
class TestAlignDiagonally:
    def test_shape(self):
        assert align_diagonally(empty(3, 4)).shape == (3, 6)

    def test_padding_per_row(self):
        board = np.array([[1, 2], [3, 4], [5, 6]], dtype=object)
        sheared = align_diagonally(board)
        assert list(sheared[0]) == [None, None, 1, 2]
        assert list(sheared[1]) == [None, 3, 4, None]
        assert list(sheared[2]) == [5, 6, None, None]

    def test_major_diagonal_becomes_column(self):
        board = np.arange(9, dtype=object).reshape(3, 3)
        sheared = align_diagonally(board)
        assert list(sheared[:, 2]) == [0, 4, 8]

    def test_get_diagonals_covers_both_directions(self):
        board = np.arange(9, dtype=object).reshape(3, 3)
        diagonals = [[v for v in d if v is not None] for d in get_diagonals(board)]
        assert [0, 4, 8] in diagonals
        assert [6, 4, 2] in diagonals
        # 2 * (rows + cols - 1) lines
        assert len(diagonals) == 10


# ---------------------------------------------------------
# Run detection
# ---------------------------------------------------------
class TestLongestRun:
    def test_ignores_empty(self):
        assert longest_run([None, None, None]) == 0

    def test_gap_breaks_run(self):
        assert longest_run(["X", "X", None, "X", "X"]) == 2

    def test_longest_wins(self):
        assert longest_run(["O", "X", "X", "X", "O", "O"]) == 3


class TestHasConsecutive:
    def test_empty_board(self):
        assert has_consecutive(empty(6, 7), 4) is False

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_row_run_of_exactly_k(self, k):
        board = place(empty(6, 7), [(5, c) for c in range(1, 1 + k)])
        assert has_consecutive(board, k) is True
        assert has_consecutive(board, k + 1) is False

    def test_column_run(self):
        board = place(empty(6, 7), [(r, 3) for r in range(2, 6)])
        assert has_consecutive(board, 4) is True
        assert has_consecutive(board, 4, check_cols=False) is False

    def test_row_only_when_requested(self):
        board = place(empty(6, 7), [(0, c) for c in range(4)])
        assert has_consecutive(board, 4, check_rows=False) is False
        assert has_consecutive(board, 4, check_cols=False, check_diagonals=False) is True

    def test_major_diagonal(self):
        board = place(empty(6, 7), [(1, 2), (2, 3), (3, 4), (4, 5)])
        assert has_consecutive(board, 4) is True
        assert has_consecutive(board, 4, check_diagonals=False) is False

    def test_anti_diagonal(self):
        board = place(empty(6, 7), [(5, 0), (4, 1), (3, 2), (2, 3)])
        assert has_consecutive(board, 4) is True
        assert has_consecutive(board, 4, check_rows=False, check_cols=False) is True

    def test_diagonal_of_k_minus_one(self):
        board = place(empty(6, 7), [(0, 0), (1, 1), (2, 2)])
        assert has_consecutive(board, 3) is True
        assert has_consecutive(board, 4) is False

    def test_wrapping_does_not_join_diagonals(self):
        """Cells on neighbouring diagonals never form a run."""
        board = place(empty(4, 4), [(0, 3), (1, 0), (2, 1), (3, 2)])
        assert has_consecutive(board, 4) is False

    def test_mixed_values_break_runs(self):
        board = np.array([["X", "X", "O", "X", "X"]], dtype=object)
        assert has_consecutive(board, 3) is False

    def test_non_square_board(self):
        board = place(empty(2, 5), [(1, c) for c in range(5)])
        assert has_consecutive(board, 5) is True
        assert has_consecutive(board, 6) is False

    def test_k_longer_than_any_line(self):
        board = place(empty(3, 3), [(0, 0), (0, 1), (0, 2)])
        assert has_consecutive(board, 10) is False

    @pytest.mark.parametrize("k", [0, -2])
    def test_non_positive_k_raises(self, k):
        with pytest.raises(ValueError):
            has_consecutive(empty(3, 3), k)

    def test_accepts_grid(self, alice):
        grid = Grid(4, 4)
        for r in range(4):
            grid.set((r, 3 - r), Piece(alice, PieceKind.CHIP))
        assert has_consecutive(grid, 4) is True
        assert has_consecutive(grid, 4, check_diagonals=False) is False

    def test_one_dimensional_board_raises(self):
        with pytest.raises(TypeError):
            has_consecutive(["X", "X", "X"], 3)


class TestOwnerEquality:
    def test_line_key(self, alice):
        rook = Piece(alice, PieceKind.ROOK)
        assert line_key(rook) == alice
        assert line_key("X") == "X"
        assert line_key(None) is None

    def test_same_owner_different_kinds_form_run(self, alice):
        board = empty(1, 4)
        for c, kind in enumerate([PieceKind.ROOK, PieceKind.PAWN, PieceKind.CHIP, PieceKind.KING]):
            board[0, c] = Piece(alice, kind)
        assert has_consecutive(board, 4) is True

    def test_opponent_piece_breaks_run(self, alice, bob):
        board = empty(1, 4)
        board[0, 0] = Piece(alice, PieceKind.CHIP)
        board[0, 1] = Piece(alice, PieceKind.CHIP)
        board[0, 2] = Piece(bob, PieceKind.CHIP)
        board[0, 3] = Piece(alice, PieceKind.CHIP)
        assert has_consecutive(board, 3) is False
        assert has_consecutive(board, 2) is True
