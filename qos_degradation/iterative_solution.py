"""Iterative framework: grow a set of paths and re-block it until all queries are cut."""

from . import constants


def update_potential_paths(graph, path_set, cost, mode):
    """Append paths that are still open under ``cost`` to ``path_set``.

    With ``mode == 1`` one shortest path per query is taken; otherwise the
    sharing-aware selection of :meth:`Graph.potential_paths` is used.
    Returns the number of paths added.
    """
    if not cost:
        cost = [0] * graph.m
    if mode == 1:
        found = [graph.potential_path(u, v, cost) for u, v in graph.path_queries]
    else:
        found = graph.potential_paths(cost)
    added = [path for path in found if path]
    path_set.extend(added)
    return len(added)


def solve(graph, algorithm, mode):
    """Repeatedly collect open paths and run ``algorithm`` on the whole set.

    ``algorithm(graph, path_set)`` must return a cost vector that blocks
    every path in ``path_set``. Returns the final cost vector.
    """
    path_set = []
    x = [0] * graph.m
    while update_potential_paths(graph, path_set, x, mode):
        x = algorithm(graph, path_set)
    return x


__all__ = ["update_potential_paths", "solve", "constants"]