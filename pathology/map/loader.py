# pathology/map/loader.py
import logging
from typing import Union
import os

from .grid_map import GridMap

logger = logging.getLogger(__name__)


class MapFormatError(ValueError):
    """地图文件无法读取或尺寸与头部声明不一致"""


def parse_map(text: str) -> GridMap:
    """
    解析地图文本:
        第一行 "<x_size> <y_size>"
        随后 y_size 行, 每行恰好 x_size 个地形字符
    """
    lines = text.splitlines()
    if not lines:
        raise MapFormatError("Map file is empty.")

    header = lines[0].split()
    if len(header) != 2:
        raise MapFormatError(f"Invalid header line {lines[0]!r}, expected '<x_size> <y_size>'.")
    try:
        x_size, y_size = int(header[0]), int(header[1])
    except ValueError as exc:
        raise MapFormatError(f"Invalid header line {lines[0]!r}, sizes must be integers.") from exc
    if x_size < 0 or y_size < 0:
        raise MapFormatError(f"Invalid header line {lines[0]!r}, sizes must be non-negative.")

    rows = lines[1:]
    for row in rows:
        if len(row) != x_size:
            raise MapFormatError(
                f"Error while parsing. Declared row of size {x_size} but got {len(row)}.")
    if len(rows) != y_size:
        raise MapFormatError(
            f"Error while parsing. Declared columns of size {y_size} but got {len(rows)}.")

    return GridMap.from_rows(rows)


def load_map(path: Union[str, os.PathLike]) -> GridMap:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise MapFormatError(f"Could not read map file {os.fspath(path)!r}: {exc}") from exc

    grid_map = parse_map(text)
    logger.info("Loaded %s from %s", grid_map, os.fspath(path))
    return grid_map
