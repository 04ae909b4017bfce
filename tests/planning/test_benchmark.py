# tests/planning/test_benchmark.py
import pytest

from pathology.benchmark import run_benchmark, summarize


@pytest.fixture(scope="module")
def runs():
    return run_benchmark(sizes=(8, 12), trials=3, blocked_density=0.2, seed=7)


def test_one_row_per_run(runs):
    assert len(runs) == 2 * 3 * 4
    assert set(runs["Algorithm"]) == {
        "Breadth", "Dijkstra", "A* - Cost + Distance", "A* - Cost + Weighted Distance"}
    assert runs["Success"].all()


def test_uniform_cost_is_never_beaten(runs):
    for _, group in runs.groupby(["Size", "Trial"]):
        costs = dict(zip(group["Algorithm"], group["PathCost"]))
        best = costs["Dijkstra"]
        assert costs["A* - Cost + Distance"] == best
        assert all(cost >= best for cost in costs.values())


def test_summary(runs):
    summary = summarize(runs)
    assert len(summary) == 2 * 4
    assert (summary["SuccessRate"] == 100.0).all()
    assert {"TimeMean", "VisitedMean", "CostMean"} <= set(summary.columns)


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError):
        run_benchmark(sizes=(5,), trials=1, algorithms=("bogo",))
