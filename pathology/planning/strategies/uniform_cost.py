# pathology/planning/strategies/uniform_cost.py
from typing import List, Optional

from pathology.map.base import MapBase
from pathology.map.terrain import TerrainCell
from pathology.planning.frontier import PriorityFrontier
from pathology.planning.ledger import SearchLedger
from pathology.types import Coordinate, CostNode
from .base import SearchStrategy


class UniformCostStrategy(SearchStrategy[CostNode]):
    """
    一致代价搜索 (Dijkstra)

    松弛条件 (两个同时满足才入队):
    1. candidate = parent.cost + child.cost 严格小于 child 当前的最优代价
    2. parent 携带的代价没有过期 (parent.cost <= ledger[parent])
       堆里可能残留同一格子的旧节点，其 ledger 已被更优路径改写，过期节点不再向外扩展。
    """

    name = "Dijkstra"

    def __init__(self, grid_map: MapBase):
        self.ledger = SearchLedger(grid_map)

    def create_frontier(self) -> PriorityFrontier:
        return PriorityFrontier()

    def create_origin(self, start: Coordinate):
        self.ledger.set_cost(start, 0)
        return self._make_node(start, 0, start)

    def can_expand(self, parent, child: TerrainCell, target: Coordinate):
        candidate = parent.cost + child.cost
        if candidate < self.ledger.cost(child.coordinate) \
                and parent.cost <= self.ledger.cost(parent.coordinate):
            self.ledger.relax(child.coordinate, candidate, parent.coordinate)
            return self._make_node(child.coordinate, candidate, target)
        return None

    def _make_node(self, coord: Coordinate, cost: int, target: Coordinate):
        return CostNode(coord, cost)

    def reconstruct_path(self, goal_cell: TerrainCell) -> List[Coordinate]:
        # 终点在前，随后是它的前驱链
        goal = goal_cell.coordinate
        prev: Optional[Coordinate] = self.ledger.prev(goal)
        return [goal] + (self.ledger.walk_back(prev) if prev is not None else [])
