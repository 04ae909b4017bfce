# pathology/planning/strategies/base.py
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from pathology.map.terrain import TerrainCell
from pathology.planning.frontier import Frontier
from pathology.types import Coordinate

NodeT = TypeVar("NodeT")


class SearchStrategy(ABC, Generic[NodeT]):
    """
    所有搜索策略的抽象基类
    驱动循环 (SearchDriver) 对所有策略完全相同，差异只体现在以下几个钩子上:
    开集的出队规则、起点节点、邻居准入判断、访问钩子、以及路径回溯方式。
    """

    name: str = "Unknown"

    @abstractmethod
    def create_frontier(self) -> Frontier[NodeT]:
        """创建本策略使用的 OpenSet"""
        pass

    @abstractmethod
    def create_origin(self, start: Coordinate) -> NodeT:
        """
        创建起点节点
        同时把 ledger 中起点的代价重置为 0 (如果有 ledger)
        """
        pass

    @abstractmethod
    def can_expand(self,
                   parent: NodeT,
                   child: TerrainCell,
                   target: Coordinate) -> Optional[NodeT]:
        """
        邻居准入判断
        :param parent: 当前出队的节点
        :param child: 候选邻居的地形单元
        :param target: 终点坐标 (启发式用)
        :return: 需要入队的新节点；不扩展则返回 None
        """
        pass

    @abstractmethod
    def reconstruct_path(self, goal_cell: TerrainCell) -> List[Coordinate]:
        """
        终点出队后回溯路径
        :return: 坐标序列，顺序为 终点 -> 起点
        """
        pass

    def on_visit(self, node: NodeT) -> None:
        """每个出队节点在扩展前都会调用 (默认什么都不做)"""
        pass
