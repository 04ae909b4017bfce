from abc import ABC, abstractmethod
from pathology.types import Coordinate

class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Coordinate, goal: Coordinate) -> float:
        """统一接口：只接受当前点和目标点"""
        pass
