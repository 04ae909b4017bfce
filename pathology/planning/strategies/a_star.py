# pathology/planning/strategies/a_star.py
from typing import Optional

from pathology.map.base import MapBase
from pathology.planning.heuristics import Heuristic, ManhattanHeuristic, WeightedManhattanHeuristic
from pathology.types import Coordinate, HeuristicNode
from .uniform_cost import UniformCostStrategy


class AStarStrategy(UniformCostStrategy):
    """
    针对四连通地形栅格的 A* 实现。

    工作流程：
    1. ledger 与准入判断完全沿用一致代价搜索 (比较的是真实路径代价 g)。
    2. 入队节点额外携带排序键 f = g + h，OpenSet 按 f 出队。
    3. 启发式只影响扩展顺序，不参与松弛比较。
    """

    name = "A* - Cost + Distance"

    def __init__(self, grid_map: MapBase, heuristic: Optional[Heuristic] = None):
        super().__init__(grid_map)
        self.h_fn = heuristic if heuristic is not None else ManhattanHeuristic()

    def create_origin(self, start: Coordinate) -> HeuristicNode:
        self.ledger.set_cost(start, 0)
        return HeuristicNode(start, 0, 0)

    def _make_node(self, coord: Coordinate, cost: int, target: Coordinate) -> HeuristicNode:
        return HeuristicNode(coord, cost, cost + self.h_fn.estimate(coord, target))


class WeightedAStarStrategy(AStarStrategy):
    """
    加权 A*: f = g + w * h
    权重由构造参数显式传入 (默认 2.0)。
    """

    name = "A* - Cost + Weighted Distance"

    def __init__(self, grid_map: MapBase, weight: float = 2.0):
        super().__init__(grid_map, WeightedManhattanHeuristic(weight))
        self.weight = weight
