"""
AI Engine for Gomoku.
Implements fixed-depth Minimax with Alpha-Beta Pruning.

Max nodes place the searching side's stones, Min nodes the opponent's.
Leaves are scored by the static evaluator from the searching side's view;
a completed five is only visible through that score. The root counts as
one evaluated node.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from ..game.board import Board, BoardSizeError, BLACK, WHITE, EMPTY, opponent
from .config import EngineConfig
from .heuristic import Heuristic
from .patterns import get_line_evaluator

logger = logging.getLogger(__name__)


@dataclass
class SearchInfo:
    """Statistics from the last root search."""
    thinking_time: float = 0.0
    search_depth: int = 0
    nodes_evaluated: int = 0
    best_move: Optional[tuple] = None
    best_score: float = 0.0
    root_scores: list = field(default_factory=list)
    alpha_cutoffs: int = 0
    beta_cutoffs: int = 0
    used_fallback: bool = False


class AIEngine:
    """
    Gomoku AI using depth-limited Alpha-Beta Pruning.

    Moves are enumerated row-major over empty cells touching a stone.
    The board passed in is mutated during the search and always restored.
    """

    INF = float('inf')

    def __init__(self, config: EngineConfig = None, heuristic: Heuristic = None,
                 rng: random.Random = None):
        self.config = config or EngineConfig()
        self.heuristic = heuristic or Heuristic(
            get_line_evaluator(self.config.strategy), self.config.board_size)
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        self.max_depth = self.config.max_depth

        # Search state
        self.node_count = 0
        self.alpha_cutoffs = 0
        self.beta_cutoffs = 0

        self.last_search = SearchInfo()

    def set_difficulty(self, max_depth: int):
        """Set AI search depth in plies."""
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def choose_move(self, board: Board, color: int) -> Optional[tuple]:
        """
        Get the best move for the given position.

        Args:
            board: Current board state, restored before returning
            color: Color to play

        Returns:
            (row, col) tuple for the best move, or None on a full board
        """
        self._check_preconditions(board, color)

        start = time.perf_counter()
        self.node_count = 0
        self.alpha_cutoffs = 0
        self.beta_cutoffs = 0

        move, score, root_scores = self._search_root(board, color, self.max_depth)

        used_fallback = move is None
        if used_fallback:
            move = self._fallback_move(board)
            logger.info("no candidate moves, opening with fallback move %s", move)

        elapsed = time.perf_counter() - start
        self.last_search = SearchInfo(
            thinking_time=elapsed,
            search_depth=self.max_depth,
            nodes_evaluated=self.node_count,
            best_move=move,
            best_score=score,
            root_scores=root_scores,
            alpha_cutoffs=self.alpha_cutoffs,
            beta_cutoffs=self.beta_cutoffs,
            used_fallback=used_fallback,
        )
        logger.debug(
            "depth=%d nodes=%d cutoffs=%d/%d time=%.3fs move=%s score=%s",
            self.max_depth, self.node_count, self.alpha_cutoffs,
            self.beta_cutoffs, elapsed, move, score)
        return move

    def _check_preconditions(self, board: Board, color: int):
        if board.size != self.config.board_size:
            raise BoardSizeError(
                f"board is {board.size}x{board.size}, engine configured for "
                f"{self.config.board_size}x{self.config.board_size}")
        if color not in (BLACK, WHITE):
            raise ValueError(f"color must be BLACK or WHITE, got {color!r}")

    def _search_root(self, board: Board, color: int, depth: int) -> tuple:
        """
        Search from the root position.

        Returns:
            (best_move, best_score, all_root_scores)
        """
        self.node_count += 1
        alpha = -self.INF
        beta = self.INF
        best_move = None
        best_score = -self.INF
        all_scores = []

        for row, col in board.candidate_moves():
            board.set(row, col, color)
            score = self._min_value(board, color, depth - 1, alpha, beta)
            board.set(row, col, EMPTY)

            all_scores.append(((row, col), score))

            # Ties go to the move seen last
            if score >= best_score:
                best_score = score
                best_move = (row, col)
            alpha = max(alpha, score)

        return best_move, best_score, all_scores

    def _max_value(self, board: Board, color: int, depth: int,
                   alpha: float, beta: float) -> float:
        """Value of a node where color is to move."""
        self.node_count += 1
        if depth == 0:
            return self.heuristic.evaluate(board, color)

        best = -self.INF
        for row, col in board.candidate_moves():
            board.set(row, col, color)
            value = self._min_value(board, color, depth - 1, alpha, beta)
            board.set(row, col, EMPTY)

            if value > best:
                best = value
            # Strict bound: equal values stay exact for the root tie-break
            if value > beta:
                self.beta_cutoffs += 1
                return value
            alpha = max(alpha, value)

        return best

    def _min_value(self, board: Board, color: int, depth: int,
                   alpha: float, beta: float) -> float:
        """Value of a node where color's opponent is to move."""
        self.node_count += 1
        if depth == 0:
            return self.heuristic.evaluate(board, color)

        opp_color = opponent(color)
        best = self.INF
        for row, col in board.candidate_moves():
            board.set(row, col, opp_color)
            value = self._max_value(board, color, depth - 1, alpha, beta)
            board.set(row, col, EMPTY)

            if value < best:
                best = value
            if value < alpha:
                self.alpha_cutoffs += 1
                return value
            beta = min(beta, value)

        return best

    def fallback_region(self, size: int) -> range:
        """Rows (and columns) of the central square used for opening moves."""
        span = self.config.fallback_span
        start = max(0, size // 2 - span // 2)
        end = min(size, start + span)
        return range(start, end)

    def _fallback_move(self, board: Board) -> Optional[tuple]:
        region = self.fallback_region(board.size)
        cells = [(row, col) for row in region for col in region
                 if board.is_empty(row, col)]
        if not cells:
            logger.warning("fallback region is full, no move available")
            return None
        return self.rng.choice(cells)
