# pathology/planning/strategies/iterative_deepening.py
from typing import List, Optional

from pathology.map.terrain import TerrainCell
from pathology.planning.frontier import LifoFrontier
from pathology.types import Coordinate, HistoricalNode
from .base import SearchStrategy


class DepthLimitedStrategy(SearchStrategy[HistoricalNode]):
    """
    深度 (代价) 受限的深度优先搜索，迭代加深的一轮。

    没有 ledger，只维护一条 "当前路径" 栈:
    每个节点出队时 (on_visit) 先把栈截回到它的深度 (即前驱所在位置)，再压入自身，
    这样无论 OpenSet 如何排列，栈始终等于当前正在探索的那条分支。
    """

    def __init__(self, limit: int, avoid_repeats: bool = False):
        self.limit = limit
        self.avoid_repeats = avoid_repeats
        self.stack: List[Coordinate] = []

    @property
    def name(self) -> str:
        return "Iterative Deepening (AD)" if self.avoid_repeats else "Iterative Deepening (KD)"

    def create_frontier(self) -> LifoFrontier[HistoricalNode]:
        return LifoFrontier()

    def create_origin(self, start: Coordinate) -> HistoricalNode:
        return HistoricalNode(start, 0, None, 0)

    def can_expand(self, parent: HistoricalNode, child: TerrainCell, target: Coordinate) -> Optional[HistoricalNode]:
        cost = parent.cost + child.cost
        if cost > self.limit:
            return None
        if self.avoid_repeats and child.coordinate in self.stack:
            return None
        return HistoricalNode(child.coordinate, cost, parent.coordinate, parent.depth + 1)

    def on_visit(self, node: HistoricalNode) -> None:
        # 允许重复时同一坐标可能在栈中出现多次，按深度截断而不是按坐标查找
        del self.stack[node.depth:]
        self.stack.append(node.coordinate)

    def reconstruct_path(self, goal_cell: TerrainCell) -> List[Coordinate]:
        # 栈底是起点；与其他策略保持一致，按 终点 -> 起点 返回
        return self.stack[::-1]
