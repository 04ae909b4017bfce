# pathology/benchmark.py
import logging
import numpy as np
import pandas as pd
from typing import Iterable, Optional, Sequence

from pathology.config import GlobalConfig
from pathology.map.generator import TerrainGenerator
from pathology.planning.runner import ALGORITHMS, run_search
from pathology.types import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHMS = ("breadth", "uniform_cost", "astar", "weighted_astar")


def run_benchmark(sizes: Iterable[int] = (20, 40),
                  trials: int = 5,
                  blocked_density: float = 0.2,
                  seed: int = 42,
                  algorithms: Sequence[str] = DEFAULT_ALGORITHMS,
                  config: Optional[GlobalConfig] = None) -> pd.DataFrame:
    """
    在随机地形上对比各搜索策略 (起点左上角，终点右下角)
    同一 size/trial 下所有算法跑在同一张地图上。
    :return: 每次运行一行的 DataFrame
    """
    config = config if config is not None else GlobalConfig()
    for key in algorithms:
        if key not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {key}")

    rows = []
    for size in sizes:
        for trial in range(trials):
            map_seed = seed + size * 1000 + trial
            generator = TerrainGenerator(blocked_density=blocked_density, seed=map_seed)
            start, goal = Coordinate(0, 0), Coordinate(size - 1, size - 1)
            grid_map = generator.generate(size, size, start, goal)

            for key in algorithms:
                result = run_search(key, grid_map, start, goal, config)
                rows.append({
                    "Size": size,
                    "Trial": trial,
                    "Algorithm": ALGORITHMS[key].name,
                    "Success": result.found,
                    "TimeMs": result.elapsed_ns / 1e6,
                    "Visited": result.cells_visited,
                    "PathSize": result.path.size if result.found else np.nan,
                    "PathCost": result.path.cost if result.found else np.nan,
                })
            logger.debug("Benchmark size=%d trial=%d done", size, trial)

    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """按 (Size, Algorithm) 汇总: 成功率、平均耗时、平均访问格子数、平均路径代价"""
    grouped = df.groupby(["Size", "Algorithm"], sort=True)
    summary = grouped.agg(
        SuccessRate=("Success", "mean"),
        TimeMean=("TimeMs", "mean"),
        VisitedMean=("Visited", "mean"),
        CostMean=("PathCost", "mean"),
    ).reset_index()
    summary["SuccessRate"] *= 100.0
    return summary
