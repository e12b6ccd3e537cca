"""Greedy blocking: raise one edge at a time by the largest budget gain."""

from . import constants, iterative_solution
from .graph import addition


def greedy_blocking_paths(graph, path_set):
    """Cost vector that blocks every path in ``path_set``, chosen greedily.

    Each round raises by one step the edge whose increment gives the largest
    gain of the capped budget; ties go to the highest edge id.
    """
    m = graph.m
    x = [0] * m
    candidates = [False] * m
    for path in path_set:
        for eid in path:
            candidates[eid] = True
    capacities = graph.capacities()
    target = constants.T * len(path_set)
    current = graph.budget(path_set, x)
    while current != target:
        best_gain = 0
        best = -1
        for i in reversed(range(m)):
            if not candidates[i] or x[i] == capacities[i]:
                continue
            gain = graph.budget(path_set, addition(x, i, 1)) - current
            if gain == 0:
                candidates[i] = False
            elif gain > best_gain:
                best_gain = gain
                best = i
        if best < 0:
            raise RuntimeError("no edge increment improves the budget")
        x = addition(x, best, 1)
        current += best_gain
    return x


def solve(graph, mode):
    """Iterative solution driven by :func:`greedy_blocking_paths`."""
    return iterative_solution.solve(graph, greedy_blocking_paths, mode)