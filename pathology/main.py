# pathology/main.py
import argparse
import logging
import math
import sys
from typing import List, Optional

from pathology.config import GlobalConfig
from pathology.map.loader import MapFormatError, load_map
from pathology.metrics import append_metrics
from pathology.planning.runner import get_algorithm, run_search
from pathology.types import Coordinate, SearchResult
from pathology.visualization.debugger import PlanningDebugger
from pathology.visualization.observers import LoggingDebugger
from pathology.visualization.renderer import render_path

EXIT_MAP_ERROR = 3

# 命令行开关 -> (算法键, 帮助)
FLAGS = [
    ("-b", "breadth", "Breadth-first search."),
    ("-l", "uniform_cost", "Uniform-cost search (Dijkstra)."),
    ("-i", "iddfs", "Iterative deepening that allows repeated states. Takes forever."),
    ("-ia", "iddfs_avoid", "Iterative deepening that prevents repeated states."),
    ("-a1", "astar", "A* using the Manhattan distance heuristic."),
    ("-a2", "weighted_astar", "A* using a weighted Manhattan distance heuristic."),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathology",
        description="Find a route between two cells of a terrain map.")
    parser.add_argument("map_path", help="Map file. Must have a header with x size and y size.")
    parser.add_argument("start_x", type=int, help="Start column.")
    parser.add_argument("start_y", type=int, help="Start row.")
    parser.add_argument("end_x", type=int, help="Goal column.")
    parser.add_argument("end_y", type=int, help="Goal row.")
    parser.add_argument("weight", type=float, nargs="?", default=None,
                        help="Heuristic weight for -a2 (default 2.0).")

    group = parser.add_mutually_exclusive_group(required=True)
    for flag, key, help_text in FLAGS:
        group.add_argument(flag, dest="algorithm", action="store_const", const=key, help=help_text)

    parser.add_argument("--quiet", action="store_true", help="Do not print any output to console.")
    parser.add_argument("--metrics", action="store_true", help="Append metrics to the metrics CSV.")
    parser.add_argument("--metrics-file", default=GlobalConfig.metrics_file,
                        help="Metrics CSV path (default: %(default)s).")
    parser.add_argument("--plot", metavar="PNG", default=None,
                        help="Save a figure of the search to this file.")
    parser.add_argument("--debug-log", metavar="DIR", default=None,
                        help="Write every expansion to a debug log under DIR.")
    return parser


def parse_args(argv: Optional[List[str]] = None):
    parser = build_parser()
    # 权重位于开关之后，需要允许位置参数与可选参数交错
    args = parser.parse_intermixed_args(argv)
    if args.weight is not None:
        if args.algorithm != "weighted_astar":
            parser.error("a trailing weight is only accepted together with -a2")
        if not math.isfinite(args.weight) or args.weight < 0:
            parser.error(f"weight must be a finite value >= 0, got {args.weight}")
    for name in ("start_x", "start_y", "end_x", "end_y"):
        if getattr(args, name) < 0:
            parser.error(f"{name} must be >= 0")
    return parser, args


def print_result(grid_map, result: SearchResult):
    print(render_path(grid_map, result.path.nodes))
    print(f"Time: {result.elapsed_ns}ns = {result.elapsed_s:.5f}s")
    print(f"Visited states: {result.cells_visited}")
    print(f"Path cost: {result.path.cost}")
    print(f"Path size: {result.path.size}")


def main(argv: Optional[List[str]] = None) -> int:
    parser, args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO,
                        format="%(levelname)s [%(name)s] %(message)s")

    config = GlobalConfig(metrics_file=args.metrics_file)
    if args.weight is not None:
        config.heuristic_weight = args.weight

    try:
        grid_map = load_map(args.map_path)
    except MapFormatError as exc:
        print(exc, file=sys.stderr)
        return EXIT_MAP_ERROR

    start = Coordinate(args.start_x, args.start_y)
    goal = Coordinate(args.end_x, args.end_y)
    for label, coord in (("start", start), ("goal", goal)):
        if not grid_map.is_inside(coord):
            parser.error(f"{label} ({coord.x}, {coord.y}) is outside the "
                         f"{grid_map.x_size}x{grid_map.y_size} map")

    debugger = None
    if args.debug_log:
        debugger = LoggingDebugger(log_dir=args.debug_log)
    elif args.plot:
        debugger = PlanningDebugger()

    algorithm = get_algorithm(args.algorithm)
    try:
        result = run_search(algorithm.key, grid_map, start, goal, config, debugger)
    finally:
        if isinstance(debugger, LoggingDebugger):
            debugger.close()

    if args.plot:
        # 延迟导入: 只有需要绘图时才加载 matplotlib
        from pathology.visualization.plotter import plot_search
        plot_search(grid_map, result, debugger, start, goal, title=algorithm.name,
                    save_path=args.plot)

    if result.path is None:
        print("No path found!")
        return 0

    if args.metrics:
        weight = config.heuristic_weight if algorithm.uses_weight else 0.0
        append_metrics(config.metrics_file, grid_map, start, goal, result, algorithm.name, weight)
    if not args.quiet:
        print_result(grid_map, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
