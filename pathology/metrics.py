# pathology/metrics.py
import logging
import os
import pandas as pd

from pathology.map.base import MapBase
from pathology.types import Coordinate, SearchResult

logger = logging.getLogger(__name__)

METRIC_COLUMNS = [
    "Map Size",
    "Nanoseconds",
    "Start - End Difference",
    "Evaluated Cells",
    "Path Distance",
    "Path Cost",
    "Algorithm",
    "Algorithm Weight",
]
HEADER_LINE = ",".join(METRIC_COLUMNS) + "\n"


def metrics_row(grid_map: MapBase, start: Coordinate, goal: Coordinate,
                result: SearchResult, algorithm_name: str, weight: float = 0.0) -> dict:
    if result.path is None:
        raise ValueError("Metrics are only recorded for searches that found a path")
    return {
        "Map Size": grid_map.x_size * grid_map.y_size,
        "Nanoseconds": result.elapsed_ns,
        "Start - End Difference": start.manhattan(goal),
        "Evaluated Cells": result.cells_visited,
        "Path Distance": result.path.size,
        "Path Cost": result.path.cost,
        "Algorithm": algorithm_name,
        "Algorithm Weight": float(weight),
    }


def append_metrics(path: str, grid_map: MapBase, start: Coordinate, goal: Coordinate,
                   result: SearchResult, algorithm_name: str, weight: float = 0.0) -> pd.DataFrame:
    """
    追加一行 CSV 指标；文件不存在或比表头还短时先 (重新) 写入表头。
    """
    row = pd.DataFrame([metrics_row(grid_map, start, goal, result, algorithm_name, weight)],
                       columns=METRIC_COLUMNS)

    write_header = not os.path.exists(path) or os.path.getsize(path) < len(HEADER_LINE)
    row.to_csv(path, mode="w" if write_header else "a", header=write_header, index=False)
    logger.info("Appended metrics for %s to %s", algorithm_name, path)
    return row
