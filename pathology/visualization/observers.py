import logging
import time
import os
from typing import Any, Dict, Optional
from pathology.visualization.debugger import IDebugger, PlanningDebugger


class LoggingDebugger(IDebugger):
    """
    Debug 模式
    用于详细分析一次搜索为什么效果不好甚至失败。
    将每次出队/入队写入日志文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/search_debug"):
        # 复用 PlanningDebugger 的存储，以便 Debug 时也能画图
        self.viz_debugger = PlanningDebugger()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"search_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"SearchDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        self.viz_debugger.record_open_set_node(node, f, h)
        self.logger.debug(f"OpenSet Push: {node} f={f:.2f} h={h:.2f}")

    def record_current_expansion(self, node: Any):
        self.viz_debugger.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def set_cost_map(self, cost_map: Any):
        self.viz_debugger.set_cost_map(cost_map)
        self.logger.info(f"Map Info set: {cost_map}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties so plotting code can treat this like a PlanningDebugger
    @property
    def expanded_nodes(self): return self.viz_debugger.expanded_nodes
    @property
    def open_set_history(self): return self.viz_debugger.open_set_history
    @property
    def cost_map(self): return self.viz_debugger.cost_map

    def expanded_xy(self):
        return self.viz_debugger.expanded_xy()
