# pathology/planning/ledger.py
import numpy as np
from typing import List, Optional

from pathology.map.base import MapBase
from pathology.types import Coordinate

# "无穷大" 代价哨兵
UNVISITED = np.iinfo(np.int64).max


class SearchLedger:
    """
    每个栅格一条记录: 已知最优代价 + 前驱坐标
    扁平数组，索引与地图一致 (y * x_size + x)。
    只由所属策略在一次搜索中读写。
    """

    def __init__(self, grid_map: MapBase):
        self._x_size = grid_map.x_size
        self._costs = np.full(grid_map.size, UNVISITED, dtype=np.int64)
        self._prev: List[Optional[Coordinate]] = [None] * grid_map.size

    def _index(self, coord: Coordinate) -> int:
        return coord.y * self._x_size + coord.x

    def cost(self, coord: Coordinate) -> int:
        return int(self._costs[self._index(coord)])

    def prev(self, coord: Coordinate) -> Optional[Coordinate]:
        return self._prev[self._index(coord)]

    def set_cost(self, coord: Coordinate, cost: int):
        self._costs[self._index(coord)] = cost

    def relax(self, coord: Coordinate, cost: int, prev: Coordinate):
        """写入更优代价与前驱"""
        i = self._index(coord)
        self._costs[i] = cost
        self._prev[i] = prev

    def is_unvisited(self, coord: Coordinate) -> bool:
        return self._costs[self._index(coord)] == UNVISITED

    def walk_back(self, coord: Coordinate) -> List[Coordinate]:
        """从 coord 沿前驱回溯到起点，结果为 [coord, ..., origin]"""
        path = []
        current: Optional[Coordinate] = coord
        while current is not None:
            path.append(current)
            current = self.prev(current)
        return path
