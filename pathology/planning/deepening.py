# pathology/planning/deepening.py
import logging
from typing import Optional

from pathology.map.base import MapBase
from pathology.planning.driver import SearchDriver
from pathology.planning.strategies import DepthLimitedStrategy
from pathology.types import Coordinate, SearchResult
from pathology.visualization.debugger import IDebugger

logger = logging.getLogger(__name__)


def iterative_deepening(grid_map: MapBase,
                        start: Coordinate,
                        goal: Coordinate,
                        avoid_repeats: bool = False,
                        start_depth: int = 20,
                        step: int = 20,
                        max_depth: int = 200,
                        debugger: Optional[IDebugger] = None) -> SearchResult:
    """
    以递增的代价上限反复运行深度受限搜索。
    访问格子数与耗时在各轮之间累加；深度超过 max_depth 后返回失败结果。
    """
    if step <= 0:
        raise ValueError(f"Deepening step must be positive, got {step}")

    result = SearchResult(elapsed_ns=0, cells_visited=0, path=None)
    depth = start_depth
    while True:
        # 每一轮都用全新的策略对象 (空栈)
        strategy = DepthLimitedStrategy(depth, avoid_repeats)
        iteration = SearchDriver.execute(strategy, grid_map, start, goal, debugger)
        result.elapsed_ns += iteration.elapsed_ns
        result.cells_visited += iteration.cells_visited
        logger.info("Evaluated %d cells at depth %d", iteration.cells_visited, depth)
        if debugger is not None:
            debugger.log(f"Depth {depth} finished", payload={"visited": iteration.cells_visited,
                                                              "found": iteration.found})

        if iteration.path is not None:
            result.path = iteration.path
            return result

        depth += step
        if depth > max_depth:
            logger.info("Depth ceiling %d reached without a path", max_depth)
            if debugger is not None:
                debugger.log(f"Depth ceiling {max_depth} reached without a path", level='WARN')
            return result
        logger.info("Deepening to %d", depth)
