"""Sampling approach: greedy blocking of randomly drawn near-shortest paths."""

from . import constants
from .graph import addition


def greedy_step(graph, samples, x, q):
    """Raise up to ``q`` edges by one step each, weighting samples by 1/probability.

    ``samples`` is a list of ``(path, probability)`` pairs. Returns a new cost
    vector; ``x`` itself is left unchanged.
    """
    m = graph.m
    candidates = [False] * m
    for path, _ in samples:
        for eid in path:
            candidates[eid] = True
    capacities = graph.capacities()
    for _ in range(q):
        best = -1
        best_score = 0.0
        for i in reversed(range(m)):
            if not candidates[i] or x[i] == capacities[i]:
                continue
            trial = addition(x, i, 1)
            score = sum(graph.path_budget(path, trial) / prob for path, prob in samples)
            if score > best_score:
                best_score = score
                best = i
        if best < 0:
            break
        x = addition(x, best, 1)
    return list(x)


def solve(graph):
    """Sample open paths and block them greedily until no sample is open."""
    x = [0] * graph.m
    while True:
        samples = graph.sample_paths(x)
        if not samples:
            break
        x = greedy_step(graph, samples, x, constants.Q)
    return x