# pathology/visualization/renderer.py
from typing import List, Sequence

from pathology.map.base import MapBase
from pathology.types import Coordinate


class EmptyPathError(ValueError):
    """没有可绘制的路径"""


def render_path(grid_map: MapBase, nodes: Sequence[Coordinate]) -> str:
    """
    把路径画回地形文本，每个地图行输出两行:
        第一行: 地形字符，与右侧格子相连时后接 " - "，否则三个空格
        第二行: 与下方格子相连的格子下面画 "|   "，否则四个空格
    路径方向不影响输出。
    """
    if not nodes:
        raise EmptyPathError("Path is empty, no valid solution.")

    x_size = grid_map.x_size
    has_right: List[bool] = [False] * grid_map.size
    has_down: List[bool] = [False] * grid_map.size

    # 连线总是记在左侧/上方的格子上
    for prev, curr in zip(nodes, nodes[1:]):
        if curr.x < prev.x:
            has_right[curr.y * x_size + curr.x] = True
        elif prev.x < curr.x:
            has_right[prev.y * x_size + prev.x] = True
        elif curr.y < prev.y:
            has_down[curr.y * x_size + curr.x] = True
        elif curr.y > prev.y:
            has_down[prev.y * x_size + prev.x] = True

    lines = []
    for y, row in enumerate(grid_map.data):
        line1, line2 = [], []
        for x, code in enumerate(row):
            i = y * x_size + x
            line1.append(str(code) + (" - " if has_right[i] else "   "))
            line2.append("|   " if has_down[i] else "    ")
        lines.append("".join(line1))
        lines.append("".join(line2))
    return "\n".join(lines) + "\n"
