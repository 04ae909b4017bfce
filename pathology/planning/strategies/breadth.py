# pathology/planning/strategies/breadth.py
from typing import List, Optional

from pathology.map.base import MapBase
from pathology.map.terrain import TerrainCell
from pathology.planning.frontier import FifoFrontier
from pathology.planning.ledger import SearchLedger
from pathology.types import Coordinate
from .base import SearchStrategy


class BreadthFirstStrategy(SearchStrategy[Coordinate]):
    """
    广度优先搜索 (忽略地形代价)
    ledger 的代价字段只当作 "已访问" 标记: 起点与所有被发现的格子都记为 0。
    先发现者获胜: 一个格子一旦记录了前驱就不再被改写。
    """

    name = "Breadth"

    def __init__(self, grid_map: MapBase):
        self.ledger = SearchLedger(grid_map)

    def create_frontier(self) -> FifoFrontier[Coordinate]:
        return FifoFrontier()

    def create_origin(self, start: Coordinate) -> Coordinate:
        self.ledger.set_cost(start, 0)
        return start

    def can_expand(self, parent: Coordinate, child: TerrainCell, target: Coordinate) -> Optional[Coordinate]:
        coord = child.coordinate
        if self.ledger.prev(coord) is None and self.ledger.is_unvisited(coord):
            self.ledger.relax(coord, 0, parent.coordinate)
            return coord
        return None

    def reconstruct_path(self, goal_cell: TerrainCell) -> List[Coordinate]:
        return self.ledger.walk_back(goal_cell.coordinate)
