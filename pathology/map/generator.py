# pathology/map/generator.py
import logging
import numpy as np
from typing import Optional, Sequence

from pathology.map.grid_map import GridMap
from pathology.map.terrain import IMPASSABLE_CODE
from pathology.types import Coordinate

logger = logging.getLogger(__name__)

# 可通行地形及其出现概率
PASSABLE_CODES = ("R", "f", "F", "h", "r", "M")
PASSABLE_WEIGHTS = (0.4, 0.2, 0.15, 0.1, 0.1, 0.05)


class TerrainGenerator:
    """
    随机地形生成器
    1. 按权重随机铺设可通行地形
    2. 按密度撒障碍 (W)
    3. 用 "推土机" 随机游走挖出一条起点到终点的通道，保证有解
    """

    def __init__(
        self,
        blocked_density: float = 0.2,
        codes: Sequence[str] = PASSABLE_CODES,
        weights: Sequence[float] = PASSABLE_WEIGHTS,
        carve: bool = True,
        seed: Optional[int] = None,
    ):
        if not 0.0 <= blocked_density <= 1.0:
            raise ValueError(f"blocked_density must be within [0, 1], got {blocked_density}")
        self.density = blocked_density
        self.codes = np.array(codes, dtype="<U1")
        probs = np.asarray(weights, dtype=float)
        self.probs = probs / probs.sum()
        self.carve = carve
        self.rng = np.random.default_rng(seed)

    def generate(self, x_size: int, y_size: int,
                 start: Optional[Coordinate] = None,
                 goal: Optional[Coordinate] = None) -> GridMap:
        start = start if start is not None else Coordinate(0, 0)
        goal = goal if goal is not None else Coordinate(x_size - 1, y_size - 1)

        grid = self.rng.choice(self.codes, size=(y_size, x_size), p=self.probs)
        blocked = self.rng.random((y_size, x_size)) < self.density
        grid[blocked] = IMPASSABLE_CODE

        if self.carve:
            self._carve_corridor(grid, start, goal)
        # 起终点本身必须可通行
        for c in (start, goal):
            if grid[c.y, c.x] == IMPASSABLE_CODE:
                grid[c.y, c.x] = "R"

        logger.debug("Generated %dx%d terrain (density=%.2f, blocked=%d)",
                     x_size, y_size, self.density, int((grid == IMPASSABLE_CODE).sum()))
        return GridMap(grid)

    def _carve_corridor(self, grid: np.ndarray, start: Coordinate, goal: Coordinate):
        """随机单调游走, 沿途清除障碍"""
        x, y = start.x, start.y
        while (x, y) != (goal.x, goal.y):
            if grid[y, x] == IMPASSABLE_CODE:
                grid[y, x] = self.rng.choice(self.codes, p=self.probs)
            dx = int(np.sign(goal.x - x))
            dy = int(np.sign(goal.y - y))
            if dx and dy:
                if self.rng.random() < 0.5:
                    x += dx
                else:
                    y += dy
            else:
                x += dx
                y += dy
        if grid[y, x] == IMPASSABLE_CODE:
            grid[y, x] = self.rng.choice(self.codes, p=self.probs)
