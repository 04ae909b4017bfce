# pathology/planning/heuristics/__init__.py

from .base import Heuristic
from .manhattan import ManhattanHeuristic, WeightedManhattanHeuristic
from .zero import ZeroHeuristic


__all__ = [
    "Heuristic",
    "ManhattanHeuristic",
    "WeightedManhattanHeuristic",
    "ZeroHeuristic",
]
