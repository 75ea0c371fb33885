"""
Threat pattern definitions for Gomoku line evaluation.
Defines the threat weights and the strategies that turn a line window
into a signed score.
"""

from enum import IntEnum


# Window symbols, relative to the side being evaluated
MINE = 'M'
OPPONENT = 'O'
EMPTY_CELL = '_'

WINDOW_LENGTH = 6


class ThreatScore(IntEnum):
    """Own-side weight of each threat class."""
    FIVE = 1_000_000
    OPEN_FOUR = 10_000        # _MMMM_
    FOUR = 1_000              # one empty end or gapped
    OPEN_THREE = 100
    THREE = 10
    TWO = 1


# Opponent threats are negated and scaled by these factors
OPPONENT_MULTIPLIERS = {
    ThreatScore.FIVE: 2,
    ThreatScore.OPEN_FOUR: 10,
    ThreatScore.FOUR: 10,
    ThreatScore.OPEN_THREE: 3,
    ThreatScore.THREE: 3,
    ThreatScore.TWO: 3,
}


class Pattern:
    """
    Pattern representation for matching.
    Uses string patterns where:
    - 'M' = our stone
    - 'O' = opponent stone
    - '_' = empty

    Exact patterns must equal the whole window; the others match anywhere
    inside it.
    """

    def __init__(self, pattern: str, score: ThreatScore, name: str = "",
                 exact: bool = False):
        self.pattern = pattern
        self.score = score
        self.name = name
        self.exact = exact
        self.length = len(pattern)

    def matches(self, window: str) -> bool:
        if self.exact:
            return window == self.pattern
        return self.pattern in window

    def mirrored(self) -> 'Pattern':
        """Same shape seen from the opponent's side."""
        swapped = self.pattern.translate(str.maketrans('MO', 'OM'))
        return Pattern(swapped, self.score, self.name, self.exact)

    def __repr__(self):
        kind = "==" if self.exact else "in"
        return f"Pattern({self.name}: {self.pattern} {kind} = {int(self.score)})"


# Pattern definitions (from most valuable to least)
# These are checked in order, first match wins
THREAT_PATTERNS = [
    # Five in a row (win)
    Pattern("MMMMM", ThreatScore.FIVE, "FIVE"),

    # Open Four, bounded by empties on both window ends
    Pattern("_MMMM_", ThreatScore.OPEN_FOUR, "OPEN_FOUR", exact=True),

    # Four (one away from five)
    Pattern("_MMMM", ThreatScore.FOUR, "FOUR_LEFT"),
    Pattern("MMMM_", ThreatScore.FOUR, "FOUR_RIGHT"),
    Pattern("M_MMM", ThreatScore.FOUR, "FOUR_GAP1"),
    Pattern("MM_MM", ThreatScore.FOUR, "FOUR_GAP2"),
    Pattern("MMM_M", ThreatScore.FOUR, "FOUR_GAP3"),

    # Open Three, whole window
    Pattern("__MMM_", ThreatScore.OPEN_THREE, "OPEN_THREE", exact=True),
    Pattern("___MMM", ThreatScore.OPEN_THREE, "OPEN_THREE_TAIL", exact=True),
    Pattern("MMM___", ThreatScore.OPEN_THREE, "OPEN_THREE_HEAD", exact=True),
    Pattern("_MMM__", ThreatScore.OPEN_THREE, "OPEN_THREE_EARLY", exact=True),

    # Three (half-open or gapped)
    Pattern("MMM__", ThreatScore.THREE, "THREE_RIGHT"),
    Pattern("_MMM_", ThreatScore.THREE, "THREE_CENTER"),
    Pattern("M_MM_", ThreatScore.THREE, "THREE_GAP1"),
    Pattern("_M_MM", ThreatScore.THREE, "THREE_GAP2"),
    Pattern("M_M_M", ThreatScore.THREE, "THREE_GAP3"),
    Pattern("MM_M_", ThreatScore.THREE, "THREE_GAP4"),
    Pattern("_MM_M", ThreatScore.THREE, "THREE_GAP5"),
    Pattern("__MMM", ThreatScore.THREE, "THREE_LEFT"),

    # Two
    Pattern("___MM", ThreatScore.TWO, "TWO_LEFT"),
    Pattern("_MM__", ThreatScore.TWO, "TWO_EARLY"),
    Pattern("__MM_", ThreatScore.TWO, "TWO_LATE"),
    Pattern("M_M__", ThreatScore.TWO, "TWO_GAP1"),
    Pattern("M__M_", ThreatScore.TWO, "TWO_GAP2"),
    Pattern("M___M", ThreatScore.TWO, "TWO_GAP3"),
    Pattern("_M__M", ThreatScore.TWO, "TWO_GAP4"),
    Pattern("__M_M", ThreatScore.TWO, "TWO_GAP5"),
]


def cell_symbol(cell: int, our_stone: int, opp_stone: int) -> str:
    """Classify one board cell relative to our_stone."""
    if cell == our_stone:
        return MINE
    if cell == opp_stone:
        return OPPONENT
    return EMPTY_CELL


def line_to_string(line: list, our_stone: int, opp_stone: int) -> str:
    """Convert a line of stones to pattern string."""
    return ''.join(cell_symbol(cell, our_stone, opp_stone) for cell in line)


def combine(own: int, opp: int) -> float:
    """Own weight minus the scaled opponent weight."""
    value = float(own)
    if opp:
        value -= OPPONENT_MULTIPLIERS[ThreatScore(opp)] * opp
    return value


class ThreatPatternEvaluator:
    """
    Scores a window by matching it against an ordered pattern table.
    The first own pattern and the first opponent pattern that match decide
    the two weights; a window holding five stones of one side is a five
    for that side.
    """

    name = "patterns"

    def __init__(self, patterns: list = None):
        self.patterns = list(THREAT_PATTERNS if patterns is None else patterns)
        self.opponent_patterns = [p.mirrored() for p in self.patterns]

    @staticmethod
    def _best(patterns: list, window: str, stones: int) -> int:
        # Five stones anywhere in the window count as a five
        if stones == 5:
            return ThreatScore.FIVE
        for pattern in patterns:
            if pattern.matches(window):
                return pattern.score
        return 0

    def score(self, window: str) -> float:
        own = self._best(self.patterns, window, window.count(MINE))
        opp = self._best(self.opponent_patterns, window, window.count(OPPONENT))
        return combine(own, opp)


class StoneCountEvaluator:
    """
    Scores a window from stone and empty-cell counts only, regardless of
    where inside the window they sit.
    """

    name = "counts"

    @staticmethod
    def classify(stones: int, empties: int) -> int:
        if stones == 5:
            return ThreatScore.FIVE
        if stones == 4:
            if empties == 0:
                return ThreatScore.OPEN_FOUR
            if empties == 1:
                return ThreatScore.FOUR
        elif stones == 3:
            if empties == 3:
                return ThreatScore.OPEN_THREE
            if empties == 2:
                return ThreatScore.THREE
        elif stones == 2 and empties >= 3:
            return ThreatScore.TWO
        return 0

    def score(self, window: str) -> float:
        empties = window.count(EMPTY_CELL)
        own = self.classify(window.count(MINE), empties)
        opp = self.classify(window.count(OPPONENT), empties)
        return combine(own, opp)


LINE_EVALUATORS = {
    ThreatPatternEvaluator.name: ThreatPatternEvaluator,
    StoneCountEvaluator.name: StoneCountEvaluator,
}


def get_line_evaluator(name: str):
    """Instantiate a line evaluation strategy by name."""
    try:
        return LINE_EVALUATORS[name]()
    except KeyError:
        raise ValueError(
            f"unknown line strategy {name!r}; "
            f"expected one of {sorted(LINE_EVALUATORS)}") from None
