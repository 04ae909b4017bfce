# pathology/map/base.py
from abc import ABC, abstractmethod
import numpy as np
from typing import List

from pathology.types import Coordinate
from pathology.map.terrain import TerrainCell

class MapBase(ABC):
    """
    地图抽象基类
    搜索核心只依赖这里的查询接口。
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地形字符矩阵, 形状 (y_size, x_size)，用于渲染或可视化。
        """
        pass

    @property
    @abstractmethod
    def x_size(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def y_size(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @abstractmethod
    def cell_at(self, coord: Coordinate) -> TerrainCell:
        """返回坐标处的地形单元 (必须在地图范围内)"""
        pass

    @abstractmethod
    def neighbors(self, coord: Coordinate) -> List[Coordinate]:
        """
        [关键接口] 四邻域中在范围内且非障碍的坐标
        顺序固定: 左, 上, 右, 下
        """
        pass

    @abstractmethod
    def is_inside(self, coord: Coordinate) -> bool:
        """检查坐标是否在地图范围内"""
        pass

    def index(self, coord: Coordinate) -> int:
        """扁平索引 y * x_size + x, ledger 与地图共用"""
        return coord.y * self.x_size + coord.x

    @property
    def size(self) -> int:
        return self.x_size * self.y_size
