# tests/planning/test_frontier.py
from pathology.planning.frontier import FifoFrontier, LifoFrontier, PriorityFrontier
from pathology.types import Coordinate, CostNode, HeuristicNode


def drain(frontier):
    out = []
    while True:
        node = frontier.pop()
        if node is None:
            return out
        out.append(node)


def test_lifo_pops_most_recent():
    frontier = LifoFrontier()
    for i in range(3):
        frontier.push(i)
    assert len(frontier) == 3
    assert drain(frontier) == [2, 1, 0]
    assert frontier.pop() is None
    assert not frontier


def test_fifo_preserves_discovery_order():
    frontier = FifoFrontier()
    for i in range(3):
        frontier.push(i)
    frontier.push(10)
    assert frontier.pop() == 0
    frontier.push(11)
    assert drain(frontier) == [1, 2, 10, 11]


def test_priority_pops_minimum_cost():
    frontier = PriorityFrontier()
    for cost in (5, 1, 3, 4, 2):
        frontier.push(CostNode(Coordinate(cost, 0), cost))
    assert [n.cost for n in drain(frontier)] == [1, 2, 3, 4, 5]


def test_priority_orders_heuristic_nodes_by_sort_cost():
    frontier = PriorityFrontier()
    frontier.push(HeuristicNode(Coordinate(0, 0), cost=1, sort_cost=9.0))
    frontier.push(HeuristicNode(Coordinate(1, 0), cost=8, sort_cost=8.5))
    assert frontier.pop().coordinate == Coordinate(1, 0)


def test_priority_ties_are_stable_and_custom_key():
    frontier = PriorityFrontier(key=lambda n: -n.cost)
    a, b, c = CostNode(Coordinate(0, 0), 1), CostNode(Coordinate(1, 0), 1), CostNode(Coordinate(2, 0), 2)
    for node in (a, b, c):
        frontier.push(node)
    assert drain(frontier) == [c, a, b]
