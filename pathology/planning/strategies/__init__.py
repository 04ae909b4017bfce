# pathology/planning/strategies/__init__.py

from .base import SearchStrategy
from .breadth import BreadthFirstStrategy
from .uniform_cost import UniformCostStrategy
from .a_star import AStarStrategy, WeightedAStarStrategy
from .iterative_deepening import DepthLimitedStrategy



__all__ = [
    "SearchStrategy",
    "BreadthFirstStrategy",
    "UniformCostStrategy",
    "AStarStrategy",
    "WeightedAStarStrategy",
    "DepthLimitedStrategy",
]
