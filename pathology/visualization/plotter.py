# 绘图逻辑 (Matplotlib)

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LogNorm
from typing import Optional

from pathology.map.base import MapBase
from pathology.types import Coordinate, SearchResult


def plot_search(grid_map: MapBase,
                result: SearchResult,
                debugger=None,
                start: Optional[Coordinate] = None,
                goal: Optional[Coordinate] = None,
                title: str = "Grid Search",
                save_path: Optional[str] = None,
                show: bool = False):
    """
    绘制地形代价底图、已扩展格子与最终路径
    :param debugger: PlanningDebugger / LoggingDebugger (可选)，用于画扩展过程
    :return: matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    # A. 地形代价底图 (对数色阶: W 的代价比普通地形大几个数量级)
    costs = np.asarray(grid_map.costs, dtype=float)
    if costs.size:
        ax.imshow(costs, cmap='Greys', norm=LogNorm(vmin=1, vmax=max(costs.max(), 2)),
                  origin='upper', alpha=0.6)

    # B. 已扩展节点 - 红色小点
    expanded = debugger.expanded_xy() if debugger is not None else None
    if expanded:
        ex_x, ex_y = expanded
        ax.scatter(ex_x, ex_y, c='red', s=6, alpha=0.3, label='Expanded Cells')

    # C. 最终路径 - 蓝色实线
    if result.path is not None:
        path_x = [c.x for c in result.path.nodes]
        path_y = [c.y for c in result.path.nodes]
        ax.plot(path_x, path_y, 'b-', linewidth=2.5, label='Path')
        ax.scatter(path_x, path_y, c='blue', s=10, zorder=5)

    # D. 起点和终点
    if start is not None:
        ax.plot(start.x, start.y, 'go', markersize=10, label='Start')
    if goal is not None:
        ax.plot(goal.x, goal.y, 'rx', markersize=10, label='Goal')

    status = (f"cost={result.path.cost}, size={result.path.size}"
              if result.path is not None else "no path")
    ax.set_title(f"{title} | visited={result.cells_visited} | {status}")
    ax.set_xlabel("X [cell]")
    ax.set_ylabel("Y [cell]")
    ax.legend(loc='upper right')
    ax.set_aspect('equal')

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path)
    if show:
        plt.show()
    return fig
