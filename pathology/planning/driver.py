# pathology/planning/driver.py
import logging
import time
from typing import List, Optional

from pathology.map.base import MapBase
from pathology.planning.strategies.base import SearchStrategy
from pathology.types import Coordinate, PathResult, SearchResult
from pathology.visualization.debugger import IDebugger, NoOpDebugger

logger = logging.getLogger(__name__)


class SearchDriver:
    """
    通用搜索循环，对所有策略完全相同:
    出队 -> 计数 -> on_visit -> 终点判断 -> 邻居经 can_expand 准入后入队
    """

    @staticmethod
    def execute(strategy: SearchStrategy,
                grid_map: MapBase,
                start: Coordinate,
                goal: Coordinate,
                debugger: Optional[IDebugger] = None) -> SearchResult:
        if debugger is None:
            debugger = NoOpDebugger()
        for label, coord in (("Start", start), ("Goal", goal)):
            if not grid_map.is_inside(coord):
                raise ValueError(f"{label} {coord} is outside the {grid_map.x_size}x{grid_map.y_size} map")
        debugger.set_cost_map(grid_map)

        cells_visited = 0
        t0 = time.perf_counter_ns()

        frontier = strategy.create_frontier()
        frontier.push(strategy.create_origin(start))

        while True:
            node = frontier.pop()
            if node is None:
                break
            cells_visited += 1
            strategy.on_visit(node)
            debugger.record_current_expansion(node)

            coord = node.coordinate
            if coord == goal:
                nodes = strategy.reconstruct_path(grid_map.cell_at(coord))
                elapsed = time.perf_counter_ns() - t0
                path = PathResult(nodes=nodes, size=len(nodes), cost=path_cost(grid_map, nodes))
                logger.debug("[%s] Goal reached after %d cells, cost %d",
                             strategy.name, cells_visited, path.cost)
                return SearchResult(elapsed, cells_visited, path)

            for option in grid_map.neighbors(coord):
                child = strategy.can_expand(node, grid_map.cell_at(option), goal)
                if child is not None:
                    frontier.push(child)
                    debugger.record_open_set_node(child, getattr(child, 'sort_cost', 0.0))

        elapsed = time.perf_counter_ns() - t0
        logger.debug("[%s] Open set is empty after %d cells, no path found.",
                     strategy.name, cells_visited)
        return SearchResult(elapsed, cells_visited, None)


def path_cost(grid_map: MapBase, nodes: List[Coordinate]) -> int:
    """除最后一个坐标 (起点) 外所有格子的通行代价之和"""
    return sum(grid_map.cell_at(c).cost for c in nodes[:-1])
