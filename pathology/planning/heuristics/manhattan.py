# pathology/planning/heuristics/manhattan.py
import math
from pathology.types import Coordinate
from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy|
    四连通栅格上每一步代价至少为 1 (R 地形)，因此 Manhattan 不会高估，满足 Admissibility。
    """
    def estimate(self, current: Coordinate, goal: Coordinate) -> float:
        return abs(current.x - goal.x) + abs(current.y - goal.y)


class WeightedManhattanHeuristic(ManhattanHeuristic):
    """
    加权曼哈顿距离: w * (|dx| + |dy|)
    w > 1 时不再可采纳，搜索更贪婪；w = 0 时退化为 Dijkstra 的排序。
    """
    def __init__(self, weight: float = 2.0):
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Heuristic weight must be a finite value >= 0, got {weight}")
        self.weight = weight

    def estimate(self, current: Coordinate, goal: Coordinate) -> float:
        return self.weight * super().estimate(current, goal)
