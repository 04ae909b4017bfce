# pathology/map/grid_map.py
import logging
import numpy as np
from collections import Counter
from typing import List, Sequence

from .base import MapBase
from .terrain import IMPASSABLE_CODE, TerrainCell, is_known, terrain_cost
from pathology.types import Coordinate

logger = logging.getLogger(__name__)


class GridMap(MapBase):
    def __init__(self, codes: np.ndarray):
        """
        :param codes: 地形字符矩阵, 形状 (y_size, x_size)
        """
        if codes.ndim != 2:
            raise ValueError(f"Terrain grid must be 2-D, got shape {codes.shape}")
        self._codes = codes
        self._y_size, self._x_size = codes.shape
        # 代价矩阵在构造时一次算好，搜索过程中只读
        lookup = np.vectorize(terrain_cost, otypes=[np.int64])
        self._costs = lookup(codes) if codes.size else np.zeros(codes.shape, dtype=np.int64)

        unknown = Counter(str(c) for c in codes.flat if not is_known(str(c)))
        for code, count in unknown.items():
            logger.warning("Unknown character %r (%d cells), using cost %d",
                           code, count, terrain_cost(code))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "GridMap":
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise ValueError(f"Rows have inconsistent widths: {sorted(widths)}")
        width = widths.pop() if widths else 0
        if width == 0:
            return cls(np.empty((len(rows), 0), dtype="<U1"))
        return cls(np.array([list(r) for r in rows], dtype="<U1"))

    @property
    def data(self) -> np.ndarray:
        return self._codes

    @property
    def costs(self) -> np.ndarray:
        return self._costs

    @property
    def x_size(self) -> int:
        return self._x_size

    @property
    def y_size(self) -> int:
        return self._y_size

    def is_inside(self, coord: Coordinate) -> bool:
        return (0 <= coord.x < self._x_size) and (0 <= coord.y < self._y_size)

    def is_blocked(self, coord: Coordinate) -> bool:
        """越界视为障碍"""
        if not self.is_inside(coord):
            return True
        return self._codes[coord.y, coord.x] == IMPASSABLE_CODE

    def cell_at(self, coord: Coordinate) -> TerrainCell:
        if not self.is_inside(coord):
            raise IndexError(f"{coord} is outside the {self._x_size}x{self._y_size} map")
        return TerrainCell(coord, str(self._codes[coord.y, coord.x]), int(self._costs[coord.y, coord.x]))

    def neighbors(self, coord: Coordinate) -> List[Coordinate]:
        x, y = coord.x, coord.y
        candidates = (
            Coordinate(x - 1, y),  # 左
            Coordinate(x, y - 1),  # 上
            Coordinate(x + 1, y),  # 右
            Coordinate(x, y + 1),  # 下
        )
        return [c for c in candidates if not self.is_blocked(c)]

    def to_rows(self) -> List[str]:
        return ["".join(row) for row in self._codes]

    def __repr__(self):
        return f"GridMap({self._x_size}x{self._y_size})"
