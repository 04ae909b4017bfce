# pathology/planning/runner.py
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathology.config import GlobalConfig
from pathology.map.base import MapBase
from pathology.planning.deepening import iterative_deepening
from pathology.planning.driver import SearchDriver
from pathology.planning.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    UniformCostStrategy,
    WeightedAStarStrategy,
)
from pathology.types import Coordinate, SearchResult
from pathology.visualization.debugger import IDebugger


@dataclass(frozen=True)
class Algorithm:
    key: str
    name: str
    run: Callable[..., SearchResult]
    uses_weight: bool = False


def _run_breadth(grid_map, start, goal, config, debugger):
    return SearchDriver.execute(BreadthFirstStrategy(grid_map), grid_map, start, goal, debugger)


def _run_uniform_cost(grid_map, start, goal, config, debugger):
    return SearchDriver.execute(UniformCostStrategy(grid_map), grid_map, start, goal, debugger)


def _run_astar(grid_map, start, goal, config, debugger):
    return SearchDriver.execute(AStarStrategy(grid_map), grid_map, start, goal, debugger)


def _run_weighted_astar(grid_map, start, goal, config, debugger):
    strategy = WeightedAStarStrategy(grid_map, weight=config.heuristic_weight)
    return SearchDriver.execute(strategy, grid_map, start, goal, debugger)


def _deepening(avoid_repeats: bool):
    def run(grid_map, start, goal, config, debugger):
        return iterative_deepening(
            grid_map, start, goal,
            avoid_repeats=avoid_repeats,
            start_depth=config.deepening_start,
            step=config.deepening_step,
            max_depth=config.deepening_max,
            debugger=debugger,
        )
    return run


ALGORITHMS: Dict[str, Algorithm] = {
    "breadth": Algorithm("breadth", "Breadth", _run_breadth),
    "uniform_cost": Algorithm("uniform_cost", "Dijkstra", _run_uniform_cost),
    "iddfs": Algorithm("iddfs", "Iterative Deepening (KD)", _deepening(False)),
    "iddfs_avoid": Algorithm("iddfs_avoid", "Iterative Deepening (AD)", _deepening(True)),
    "astar": Algorithm("astar", "A* - Cost + Distance", _run_astar),
    "weighted_astar": Algorithm("weighted_astar", "A* - Cost + Weighted Distance",
                                _run_weighted_astar, uses_weight=True),
}


def get_algorithm(key: str) -> Algorithm:
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {key}") from None


def run_search(algorithm: str,
               grid_map: MapBase,
               start: Coordinate,
               goal: Coordinate,
               config: Optional[GlobalConfig] = None,
               debugger: Optional[IDebugger] = None) -> SearchResult:
    """按算法键选择一次策略并执行"""
    if config is None:
        config = GlobalConfig()
    return get_algorithm(algorithm).run(grid_map, start, goal, config, debugger)
