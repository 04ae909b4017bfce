# pathology/planning/__init__.py

from .frontier import Frontier, FifoFrontier, LifoFrontier, PriorityFrontier
from .ledger import SearchLedger
from .driver import SearchDriver, path_cost
from .deepening import iterative_deepening
from .runner import ALGORITHMS, get_algorithm, run_search

__all__ = [
    "Frontier",
    "FifoFrontier",
    "LifoFrontier",
    "PriorityFrontier",
    "SearchLedger",
    "SearchDriver",
    "path_cost",
    "iterative_deepening",
    "ALGORITHMS",
    "get_algorithm",
    "run_search",
]
