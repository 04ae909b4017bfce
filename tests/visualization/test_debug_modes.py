import pytest
import os
import glob
import matplotlib
matplotlib.use("Agg")

from pathology.map import parse_map
from pathology.planning import SearchDriver, run_search
from pathology.planning.strategies import UniformCostStrategy
from pathology.types import Coordinate
from pathology.visualization.debugger import NoOpDebugger, PlanningDebugger
from pathology.visualization.observers import LoggingDebugger
from pathology.visualization.plotter import plot_search


@pytest.fixture
def search_setup():
    grid_map = parse_map("3 1\nRRR")
    return grid_map, Coordinate(0, 0), Coordinate(2, 0)


def test_noop_mode(search_setup):
    grid_map, start, goal = search_setup
    debugger = NoOpDebugger()
    result = SearchDriver.execute(UniformCostStrategy(grid_map), grid_map, start, goal, debugger)
    assert result.found
    # NoOpDebugger should not record anything
    assert not hasattr(debugger, 'expanded_nodes')
    assert not hasattr(debugger, 'open_set_history')


def test_planning_debugger_records_search(search_setup):
    grid_map, start, goal = search_setup
    debugger = PlanningDebugger()
    SearchDriver.execute(UniformCostStrategy(grid_map), grid_map, start, goal, debugger)

    assert debugger.expanded_nodes == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)]
    assert [(x, y) for x, y, _, _ in debugger.open_set_history] == [(1, 0), (2, 0)]
    assert debugger.cost_map is grid_map
    assert debugger.expanded_xy() == ([0, 1, 2], [0, 0, 0])


def test_logging_debugger_writes_file(search_setup, tmp_path):
    grid_map, start, goal = search_setup
    log_dir = str(tmp_path / "search_debug")
    debugger = LoggingDebugger(log_dir=log_dir)
    run_search("breadth", grid_map, start, goal, debugger=debugger)
    debugger.log("done", payload={"visited": len(debugger.expanded_nodes)})
    debugger.close()

    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1
    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Debug Session Started" in content
    assert "Expanding" in content
    assert "Payload" in content
    assert len(debugger.expanded_nodes) == 3


def test_plot_search_saves_figure(search_setup, tmp_path):
    grid_map, start, goal = search_setup
    debugger = PlanningDebugger()
    result = run_search("astar", grid_map, start, goal, debugger=debugger)
    out = tmp_path / "search.png"
    fig = plot_search(grid_map, result, debugger, start, goal, title="A*", save_path=str(out))
    assert out.exists()
    assert "cost=2" in fig.axes[0].get_title()


def test_plot_search_without_path(tmp_path):
    grid_map = parse_map("3 1\nRWR")
    result = run_search("breadth", grid_map, Coordinate(0, 0), Coordinate(2, 0))
    fig = plot_search(grid_map, result, save_path=str(tmp_path / "none.png"))
    assert "no path" in fig.axes[0].get_title()


def test_logging_debugger_records_deepening_rounds(tmp_path):
    # 代价 30: 深度 20 失败, 深度 40 成功
    grid_map = parse_map("4 1\nRMMM")
    debugger = LoggingDebugger(log_dir=str(tmp_path))
    result = run_search("iddfs_avoid", grid_map, Coordinate(0, 0), Coordinate(3, 0), debugger=debugger)
    debugger.close()
    assert result.path.cost == 30

    with open(debugger.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Depth 20 finished | Payload: {'visited': 3, 'found': False}" in content
    assert "Depth 40 finished | Payload: {'visited': 4, 'found': True}" in content


def test_logging_debugger_warns_at_depth_ceiling(tmp_path):
    grid_map = parse_map("3 1\nRWR")
    debugger = LoggingDebugger(log_dir=str(tmp_path))
    run_search("iddfs", grid_map, Coordinate(0, 0), Coordinate(2, 0), debugger=debugger)
    debugger.close()
    with open(debugger.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "WARNING - Depth ceiling 200 reached without a path" in content


def test_noop_debugger_ignores_log():
    NoOpDebugger().log("ignored", level='WARN', payload={"a": 1})
