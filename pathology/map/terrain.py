# pathology/map/terrain.py
from dataclasses import dataclass
from typing import Dict

from pathology.types import Coordinate

IMPASSABLE_CODE = "W"
IMPASSABLE_COST = 100000

# 地形字符 -> 通行代价
TERRAIN_COSTS: Dict[str, int] = {
    "R": 1,
    "f": 2,
    "F": 4,
    "h": 5,
    "r": 7,
    "M": 10,
    IMPASSABLE_CODE: IMPASSABLE_COST,
}


def terrain_cost(code: str) -> int:
    """未知字符按不可通行的代价处理 (告警由调用方负责)"""
    return TERRAIN_COSTS.get(code, IMPASSABLE_COST)


def is_known(code: str) -> bool:
    return code in TERRAIN_COSTS


@dataclass(frozen=True)
class TerrainCell:
    coordinate: Coordinate
    code: str
    cost: int

    @property
    def blocked(self) -> bool:
        return self.code == IMPASSABLE_CODE
