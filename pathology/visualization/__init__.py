# pathology/visualization/__init__.py

from .debugger import IDebugger, NoOpDebugger, PlanningDebugger
from .observers import LoggingDebugger
from .renderer import EmptyPathError, render_path

__all__ = [
    "IDebugger",
    "NoOpDebugger",
    "PlanningDebugger",
    "LoggingDebugger",
    "EmptyPathError",
    "render_path",
]
