# pathology/map/__init__.py

from .base import MapBase
from .grid_map import GridMap
from .generator import TerrainGenerator
from .loader import MapFormatError, load_map, parse_map
from .terrain import IMPASSABLE_CODE, IMPASSABLE_COST, TERRAIN_COSTS, TerrainCell

__all__ = [
    "MapBase",
    "GridMap",
    "TerrainGenerator",
    "MapFormatError",
    "load_map",
    "parse_map",
    "IMPASSABLE_CODE",
    "IMPASSABLE_COST",
    "TERRAIN_COSTS",
    "TerrainCell",
]
