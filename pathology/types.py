# pathology/types.py
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    栅格坐标 (x 为列, y 为行)
    相等与排序完全按 (x, y) 结构比较。
    """
    x: int
    y: int

    # 坐标本身即可作为 "仅坐标" 的搜索节点 (广度搜索使用)
    @property
    def coordinate(self) -> "Coordinate":
        return self

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class CostNode:
    """一致代价搜索节点: 按累计代价升序出队"""
    coordinate: Coordinate
    cost: int

    @property
    def sort_cost(self) -> float:
        return self.cost


@dataclass
class HeuristicNode:
    """
    A* 节点
    cost: 真实路径代价 (g)
    sort_cost: 出队排序用的代价 (g + w * h)
    """
    coordinate: Coordinate
    cost: int
    sort_cost: float


@dataclass
class HistoricalNode:
    """迭代加深节点, 记录直接前驱与所在分支的深度 (没有全局 ledger 可查)"""
    coordinate: Coordinate
    cost: int
    prev: Optional[Coordinate] = None
    depth: int = 0  # 起点为 0, 子节点为父节点 + 1


@dataclass
class PathResult:
    """路径: nodes 从终点到起点排列"""
    nodes: List[Coordinate]
    size: int
    cost: int


@dataclass
class SearchResult:
    """一次搜索的统计结果"""
    elapsed_ns: int
    cells_visited: int
    path: Optional[PathResult] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def elapsed_s(self) -> float:
        return self.elapsed_ns / 1_000_000_000
