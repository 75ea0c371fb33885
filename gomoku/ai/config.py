"""
Engine configuration for Gomoku.
Search depth, board size, line strategy and opening fallback settings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..game.board import BOARD_SIZE
from .patterns import LINE_EVALUATORS


DEFAULT_MAX_DEPTH = 3
DEFAULT_STRATEGY = "patterns"
# Side of the central square used for the opening move
FALLBACK_SPAN = 4
MIN_BOARD_SIZE = 5


@dataclass(frozen=True)
class EngineConfig:
    """Validated settings for one AIEngine."""
    max_depth: int = DEFAULT_MAX_DEPTH
    board_size: int = BOARD_SIZE
    strategy: str = DEFAULT_STRATEGY
    fallback_span: int = FALLBACK_SPAN
    seed: Optional[int] = None  # None = unseeded fallback

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.board_size < MIN_BOARD_SIZE:
            raise ValueError(f"board_size must be at least {MIN_BOARD_SIZE}")
        if not 1 <= self.fallback_span <= self.board_size:
            raise ValueError("fallback_span must fit on the board")
        if self.strategy not in LINE_EVALUATORS:
            raise ValueError(
                f"unknown strategy {self.strategy!r}; "
                f"expected one of {sorted(LINE_EVALUATORS)}")


class AIDifficulty(Enum):
    """AI difficulty levels with corresponding search depths."""
    EASY = ("easy", 1)
    MEDIUM = ("medium", 2)
    HARD = ("hard", 3)      # default
    EXPERT = ("expert", 4)

    def __init__(self, label: str, depth: int):
        self._label = label
        self._depth = depth

    @property
    def label(self) -> str:
        return self._label

    @property
    def depth(self) -> int:
        return self._depth

    @classmethod
    def from_label(cls, label: str) -> 'AIDifficulty':
        for level in cls:
            if level.label == label:
                return level
        raise ValueError(f"unknown difficulty {label!r}")

    def config(self, **overrides) -> EngineConfig:
        return EngineConfig(max_depth=self.depth, **overrides)
