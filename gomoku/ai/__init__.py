from .config import AIDifficulty, EngineConfig
from .engine import AIEngine, SearchInfo
from .heuristic import Heuristic
from .patterns import ThreatPatternEvaluator, StoneCountEvaluator, ThreatScore

__all__ = [
    'AIDifficulty', 'EngineConfig', 'AIEngine', 'SearchInfo', 'Heuristic',
    'ThreatPatternEvaluator', 'StoneCountEvaluator', 'ThreatScore',
]
