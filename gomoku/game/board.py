"""
Board implementation for Gomoku.
Square grid of cell states backed by a numpy int8 array.
"""

import numpy as np

EMPTY = 0
BLACK = 1
WHITE = 2

BOARD_SIZE = 15

# 8-connectivity offsets used for neighbour gating
NEIGHBORS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

SYMBOLS = {EMPTY: '.', BLACK: 'X', WHITE: 'O'}


class BoardSizeError(ValueError):
    """Board dimensions do not match the configured size."""


def opponent(color: int) -> int:
    """Return the other side's color."""
    return WHITE if color == BLACK else BLACK


class Board:
    """
    Gomoku board.
    Cells hold EMPTY, BLACK or WHITE; coordinates are 0-based (row, col).
    """

    def __init__(self, size: int = BOARD_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

    @classmethod
    def from_strings(cls, rows: list) -> 'Board':
        """
        Build a board from text rows ('.' empty, 'X' black, 'O' white).
        Whitespace inside a row is ignored.
        """
        cleaned = [''.join(row.split()) for row in rows if row.strip()]
        if not cleaned:
            raise ValueError("board text is empty")

        size = len(cleaned)
        board = cls(size)
        lookup = {symbol: color for color, symbol in SYMBOLS.items()}
        for row, line in enumerate(cleaned):
            if len(line) != size:
                raise ValueError(
                    f"row {row} has {len(line)} cells, expected {size}")
            for col, symbol in enumerate(line.upper()):
                if symbol not in lookup:
                    raise ValueError(f"unknown symbol {symbol!r} at ({row}, {col})")
                board.set(row, col, lookup[symbol])
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> int:
        """Get stone at position. Returns EMPTY, BLACK, or WHITE."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, state: int):
        """Write a cell state without any legality checks."""
        self.grid[row, col] = state

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == EMPTY

    def is_empty_board(self) -> bool:
        return not self.grid.any()

    def place_stone(self, row: int, col: int, color: int) -> bool:
        """
        Place a stone on the board.
        Returns True if successful, False if position is off-board or occupied.
        """
        if not self.in_bounds(row, col):
            return False
        if not self.is_empty(row, col):
            return False
        self.set(row, col, color)
        return True

    def remove_stone(self, row: int, col: int) -> int:
        """
        Remove a stone from the board.
        Returns the color of the removed stone.
        """
        color = self.get(row, col)
        self.set(row, col, EMPTY)
        return color

    def count_stones(self, color: int) -> int:
        """Count number of stones of a color."""
        return int(np.count_nonzero(self.grid == color))

    def has_occupied_neighbor(self, row: int, col: int) -> bool:
        """Check whether any of the 8 surrounding cells holds a stone."""
        for dr, dc in NEIGHBORS:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c) and self.grid[r, c] != EMPTY:
                return True
        return False

    def occupied_cells(self) -> list:
        """Occupied positions in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid != EMPTY)]

    def candidate_moves(self) -> list:
        """
        Empty cells with at least one occupied neighbour, row-major.
        Same result as scanning every cell with has_occupied_neighbor().
        """
        occupied = self.grid != EMPTY
        padded = np.pad(occupied, 1)
        near = np.zeros_like(occupied)
        for dr, dc in NEIGHBORS:
            near |= padded[1 + dr:1 + dr + self.size, 1 + dc:1 + dc + self.size]
        return [(int(r), int(c)) for r, c in np.argwhere(near & ~occupied)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        lines = []

        # Column headers
        header = '   ' + ''.join(f'{i:^3d}' for i in range(self.size))
        lines.append(header)

        for row in range(self.size):
            line = f'{row:2d} '
            for col in range(self.size):
                line += f' {SYMBOLS[self.get(row, col)]} '
            lines.append(line)

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f'Board(size={self.size}, black={self.count_stones(BLACK)}, '
                f'white={self.count_stones(WHITE)})')
