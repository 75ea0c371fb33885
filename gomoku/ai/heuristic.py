"""
Heuristic evaluation function for Gomoku.
Evaluates board positions using threat scoring over 6-cell line windows.
"""

from ..game.board import Board, BoardSizeError, BOARD_SIZE, opponent
from .patterns import WINDOW_LENGTH, ThreatPatternEvaluator, line_to_string


# Direction vectors for line extraction.
# The reverse directions are covered by the stone at the other end of
# the same line.
DIRECTIONS = [
    (0, 1),   # Horizontal →
    (1, 0),   # Vertical ↓
    (1, 1),   # Diagonal ↘
    (1, -1),  # Diagonal ↙
]


class Heuristic:
    """
    Evaluates board positions for the AI.
    Every occupied cell contributes the score of its four forward windows,
    as judged by the line strategy.
    """

    def __init__(self, line_evaluator=None, board_size: int = BOARD_SIZE):
        self.line_evaluator = line_evaluator or ThreatPatternEvaluator()
        self.board_size = board_size

    def evaluate(self, board: Board, color: int) -> float:
        """
        Evaluate the board position from color's perspective.

        Args:
            board: Current board state (not modified)
            color: The color to evaluate for (BLACK or WHITE)

        Returns:
            Score, larger is better for color
        """
        if board.size != self.board_size:
            raise BoardSizeError(
                f"board is {board.size}x{board.size}, "
                f"evaluator configured for {self.board_size}x{self.board_size}")

        opp_color = opponent(color)
        cells = board.grid.tolist()
        size = board.size
        score = self.line_evaluator.score

        total = 0.0
        for row, col in board.occupied_cells():
            for dr, dc in DIRECTIONS:
                window = self._scan(cells, size, row, col, dr, dc, color, opp_color)
                total += score(window)
        return total

    def line_window(self, board: Board, row: int, col: int,
                    dr: int, dc: int, color: int) -> str:
        """Window string seen from color, starting at (row, col)."""
        return self._scan(board.grid.tolist(), board.size, row, col, dr, dc,
                          color, opponent(color))

    def line_score(self, board: Board, row: int, col: int,
                   dr: int, dc: int, color: int) -> float:
        return self.line_evaluator.score(
            self.line_window(board, row, col, dr, dc, color))

    @staticmethod
    def _scan(cells: list, size: int, row: int, col: int, dr: int, dc: int,
              color: int, opp_color: int) -> str:
        """Collect up to WINDOW_LENGTH cells, stopping at the board edge."""
        line = []
        for k in range(WINDOW_LENGTH):
            r, c = row + k * dr, col + k * dc
            if not (0 <= r < size and 0 <= c < size):
                break
            line.append(cells[r][c])
        return line_to_string(line, color, opp_color)
