"""Tests for Board implementation."""

import sys
sys.path.insert(0, '.')

import numpy as np
import pytest

from gomoku.game.board import Board, BLACK, WHITE, EMPTY, BOARD_SIZE, opponent


class TestBoard:
    """Test cases for Board class."""

    def test_initial_state(self):
        """Board should start empty."""
        board = Board()
        assert board.size == BOARD_SIZE
        assert board.grid.shape == (BOARD_SIZE, BOARD_SIZE)
        assert board.is_empty_board()
        assert board.count_stones(BLACK) == 0
        assert board.count_stones(WHITE) == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Board(0)
        with pytest.raises(ValueError):
            Board(-3)

    def test_get_set(self):
        board = Board(9)
        board.set(4, 5, WHITE)
        assert board.get(4, 5) == WHITE
        board.set(4, 5, EMPTY)
        assert board.get(4, 5) == EMPTY

    def test_place_stone(self):
        """Test placing stones."""
        board = Board()

        assert board.place_stone(7, 7, BLACK)
        assert board.get(7, 7) == BLACK
        assert board.count_stones(BLACK) == 1

        assert board.place_stone(7, 8, WHITE)
        assert board.get(7, 8) == WHITE
        assert board.count_stones(WHITE) == 1

        # Cannot place on occupied or off-board cells
        assert not board.place_stone(7, 7, WHITE)
        assert not board.place_stone(-1, 0, BLACK)
        assert not board.place_stone(0, BOARD_SIZE, BLACK)

    def test_remove_stone(self):
        """Test removing stones."""
        board = Board()
        board.place_stone(5, 5, BLACK)

        removed = board.remove_stone(5, 5)
        assert removed == BLACK
        assert board.get(5, 5) == EMPTY
        assert board.count_stones(BLACK) == 0

    def test_in_bounds(self):
        board = Board(9)
        assert board.in_bounds(0, 0)
        assert board.in_bounds(8, 8)
        assert not board.in_bounds(9, 0)
        assert not board.in_bounds(0, -1)

    def test_copy(self):
        """Test board copy."""
        board = Board()
        board.place_stone(7, 7, BLACK)

        copy = board.copy()
        assert copy.get(7, 7) == BLACK
        assert copy == board

        # Modify original shouldn't affect copy
        board.place_stone(8, 8, WHITE)
        assert copy.get(8, 8) == EMPTY
        assert copy != board

    def test_opponent(self):
        assert opponent(BLACK) == WHITE
        assert opponent(WHITE) == BLACK


class TestNeighbors:
    """Neighbour gating used by move generation."""

    def test_empty_board_has_no_candidates(self):
        board = Board()
        assert board.candidate_moves() == []
        assert not board.has_occupied_neighbor(7, 7)

    def test_single_stone(self):
        board = Board(9)
        board.place_stone(4, 4, BLACK)

        candidates = board.candidate_moves()
        assert len(candidates) == 8
        assert (4, 4) not in candidates  # Occupied
        assert (3, 3) in candidates
        assert (5, 5) in candidates
        assert (4, 6) not in candidates  # Two cells away

    def test_corner_is_bounds_safe(self):
        board = Board(9)
        board.place_stone(0, 0, WHITE)
        assert board.candidate_moves() == [(0, 1), (1, 0), (1, 1)]
        assert board.has_occupied_neighbor(1, 1)
        assert not board.has_occupied_neighbor(8, 8)

    def test_candidates_match_neighbor_scan(self):
        board = Board.from_strings([
            "X......",
            ".......",
            "...O...",
            "...XX..",
            ".......",
            ".......",
            "......O",
        ])
        expected = [
            (row, col)
            for row in range(board.size)
            for col in range(board.size)
            if board.is_empty(row, col) and board.has_occupied_neighbor(row, col)
        ]
        assert board.candidate_moves() == expected

    def test_occupied_cells_row_major(self):
        board = Board(5)
        board.place_stone(3, 1, BLACK)
        board.place_stone(0, 4, WHITE)
        board.place_stone(3, 0, WHITE)
        assert board.occupied_cells() == [(0, 4), (3, 0), (3, 1)]


class TestBoardText:
    """Parsing and rendering."""

    def test_from_strings(self):
        board = Board.from_strings([
            ". . X . .",
            ". O . . .",
            ". . . . .",
            ". . . . .",
            "x . . . .",
        ])
        assert board.size == 5
        assert board.get(0, 2) == BLACK
        assert board.get(1, 1) == WHITE
        assert board.get(4, 0) == BLACK
        assert board.count_stones(BLACK) == 2

    def test_from_strings_ragged(self):
        with pytest.raises(ValueError):
            Board.from_strings(["...", "..", "..."])

    def test_from_strings_bad_symbol(self):
        with pytest.raises(ValueError):
            Board.from_strings(["..#", "...", "..."])

    def test_from_strings_empty(self):
        with pytest.raises(ValueError):
            Board.from_strings(["", "  "])

    def test_str(self):
        board = Board(5)
        board.place_stone(1, 2, BLACK)
        board.place_stone(3, 0, WHITE)
        lines = str(board).split('\n')
        assert len(lines) == 6
        assert lines[2] == ' 1  .  .  X  .  . '
        assert lines[4] == ' 3  O  .  .  .  . '

    def test_round_trip_grid(self):
        board = Board.from_strings(["X.O..", ".....", ".....", ".....", "....X"])
        assert np.array_equal(
            board.grid[0], np.array([BLACK, EMPTY, WHITE, EMPTY, EMPTY]))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
