# [关键] 全局配置定义

# pathology/config.py
from dataclasses import dataclass

@dataclass
class GlobalConfig:
    heuristic_weight: float = 2.0   # 加权 A* 的启发式权重
    deepening_start: int = 20       # 迭代加深的初始深度 (代价上限)
    deepening_step: int = 20
    deepening_max: int = 200
    metrics_file: str = "Metrics.csv"
