import os
import sys
import argparse
import logging
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保未安装时也能找到 pathology 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pathology.benchmark import DEFAULT_ALGORITHMS, run_benchmark, summarize
from pathology.config import GlobalConfig

LOG_DIR = "logs/"


def plot_comparisons(summary):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))

    metrics = [
        ('SuccessRate', 'Success Rate (%)', 'Reliability'),
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('VisitedMean', 'Visited Cells', 'Space Complexity'),
        ('CostMean', 'Path Cost', 'Optimality'),
    ]

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for algo, data in summary.groupby('Algorithm'):
            ax.plot(data['Size'], data[metric], 'o-', label=algo)
        ax.set_xlabel('Map Size (cells per side)')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)
        # 仅在第一个图显示图例，避免遮挡
        if i == 0:
            ax.legend()

    plt.tight_layout()
    return fig


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare search strategies on random terrain")
    parser.add_argument("--sizes", type=int, nargs="+", default=[20, 40, 60], help="Map side lengths")
    parser.add_argument("--trials", type=int, default=10, help="Maps per size")
    parser.add_argument("--density", type=float, default=0.2, help="Impassable cell density")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--weight", type=float, default=2.0, help="Weighted A* heuristic weight")
    parser.add_argument("--algos", nargs="+", default=list(DEFAULT_ALGORITHMS), help="Algorithm keys")
    parser.add_argument("--show", action="store_true", help="Show plot")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")

    print(f"=== 开始策略对比实验 (sizes={args.sizes}, trials={args.trials}, density={args.density}) ===")
    df = run_benchmark(args.sizes, args.trials, args.density, args.seed, args.algos,
                       GlobalConfig(heuristic_weight=args.weight))
    summary = summarize(df)
    print(summary.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

    os.makedirs(LOG_DIR, exist_ok=True)
    df.to_csv(os.path.join(LOG_DIR, "benchmark_runs.csv"), index=False)

    fig = plot_comparisons(summary)
    fig.savefig(os.path.join(LOG_DIR, "benchmark_strategies.png"))
    if args.show:
        plt.show()
