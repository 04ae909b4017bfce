# pathology/visualization/debugger.py
from abc import ABC, abstractmethod
from typing import List, Any, Dict, Optional, Tuple

class IDebugger(ABC):
    """调试器接口: 搜索驱动在关键点回调，算法本身不关心记录逻辑"""
    @abstractmethod
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        """记录加入 OpenSet 的节点及其代价"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """记录当前正在扩展 (出队) 的节点"""
        pass

    @abstractmethod
    def set_cost_map(self, cost_map: Any):
        """设置底图"""
        pass

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """搜索之外的阶段性事件 (如迭代加深换轮)，默认忽略"""
        pass

class NoOpDebugger(IDebugger):
    """
    [工业界技巧] 空对象模式 (Null Object Pattern)
    用于生产环境。所有操作不做任何事情，开销极小。
    """
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def set_cost_map(self, cost_map: Any): pass

class PlanningDebugger(IDebugger):
    """
    真正的记录器
    用于开发、绘图与基准统计。
    """
    def __init__(self):
        # 存储格式: List[Tuple[x, y, f, h]]
        self.open_set_history: List[Tuple[int, int, float, float]] = []
        # 存储格式: List[Coordinate]
        self.expanded_nodes: List[Any] = []
        self.cost_map = None

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        # 节点可能是 Coordinate 本身，也可能是携带 coordinate 的搜索节点
        coord = getattr(node, 'coordinate', node)
        self.open_set_history.append((coord.x, coord.y, f, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(getattr(node, 'coordinate', node))

    def set_cost_map(self, cost_map: Any):
        self.cost_map = cost_map

    def expanded_xy(self) -> Optional[Tuple[List[int], List[int]]]:
        if not self.expanded_nodes:
            return None
        return [c.x for c in self.expanded_nodes], [c.y for c in self.expanded_nodes]
