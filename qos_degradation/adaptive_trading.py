"""Adaptive trading: raise an edge by several steps at the best gain per step."""

from . import constants, iterative_solution
from .graph import addition


def greedy_blocking_paths(graph, path_set):
    """Cost vector that blocks every path in ``path_set``.

    Each round picks the edge and step count with the largest budget gain
    per step. An edge whose increment stops changing the budget is not
    raised further in that round.
    """
    m = graph.m
    x = [0] * m
    target = constants.T * len(path_set)
    current = graph.budget(path_set, x)
    while current != target:
        best_gain, best_steps, best = 0, 1, -1
        for i in reversed(range(m)):
            steps_left = len(graph.edges[i].weight) - x[i]
            for j in range(steps_left):
                gain = graph.budget(path_set, addition(x, i, j)) - current
                if gain == 0:
                    if j == 0:
                        continue
                    break
                if best_gain * j < gain * best_steps:
                    best_gain, best_steps, best = gain, j, i
        if best < 0:
            raise RuntimeError("no edge increment improves the budget")
        x = addition(x, best, best_steps)
        current += best_gain
    return x


def solve(graph, mode):
    """Iterative solution driven by :func:`greedy_blocking_paths`."""
    return iterative_solution.solve(graph, greedy_blocking_paths, mode)