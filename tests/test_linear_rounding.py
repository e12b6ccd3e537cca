import math

import pytest

from qos_degradation import linear_rounding
from qos_degradation.graph import Graph
from qos_degradation.linear_rounding import Ellipsoid

PATH_GRAPH = "3 2 1\n0 1 2 1 30\n1 2 2 1 30\n0 2\n"
NO_QUERY_GRAPH = "3 2 0\n0 1 2 1 30\n1 2 2 1 30\n"
UNREACHABLE_GRAPH = "3 1 1\n0 1 2 1 30\n0 2\n"


def test_new_ellipsoid_is_a_ball_at_origin():
    ell = Ellipsoid(2, 3)
    assert ell.center() == [0.0, 0.0]
    assert ell.center_norm() == 0.0
    assert ell.longest_axis_length() == pytest.approx(3.0)


def test_log_volume_of_disk():
    ell = Ellipsoid(2, 3)
    assert ell.log_volume() == pytest.approx(math.log(9 * math.pi))


def test_volume_check_depends_on_size():
    assert Ellipsoid(2, 3).volume_check() is False
    assert Ellipsoid(2, 0.5).volume_check() is True


def test_zero_dimensions_rejected():
    with pytest.raises(ValueError):
        Ellipsoid(0, 1)


def test_update_moves_center_and_shrinks_volume():
    ell = Ellipsoid(2, 3)
    before = ell.log_volume()
    ell.update([1, 0])
    assert ell.center() == pytest.approx([1.0, 0.0])
    assert ell.center_norm() == pytest.approx(1.0)
    assert ell.log_volume() < before


def test_update_clips_center_to_non_negative():
    ell = Ellipsoid(2, 3)
    ell.update([-1, 0])
    assert all(c >= 0 for c in ell.center())
    assert ell.center_norm() == pytest.approx(0.0)


def test_update_rejects_wrong_length():
    ell = Ellipsoid(2, 3)
    with pytest.raises(ValueError):
        ell.update([1, 0, 0])


def test_update_rejects_zero_cut():
    ell = Ellipsoid(2, 3)
    with pytest.raises(ValueError):
        ell.update([0, 0])


def test_update_rejects_one_dimension():
    ell = Ellipsoid(1, 3)
    with pytest.raises(ValueError):
        ell.update([1])


def test_step_returns_center_when_nothing_to_block():
    graph = Graph.loads(NO_QUERY_GRAPH)
    assert linear_rounding.ellipsoid_step(graph, 1) == [0.0, 0.0]


def test_step_with_zero_bound_fails():
    graph = Graph.loads(NO_QUERY_GRAPH)
    assert linear_rounding.ellipsoid_step(graph, 0) == []


def test_step_fails_when_volume_runs_out():
    graph = Graph.loads(PATH_GRAPH)
    assert linear_rounding.ellipsoid_step(graph, 1) == []


def test_search_without_queries_finds_zero_vector():
    graph = Graph.loads(NO_QUERY_GRAPH)
    assert linear_rounding.ellipsoid_search(graph) == [0.0, 0.0]


def test_search_on_path_graph_finds_nothing():
    graph = Graph.loads(PATH_GRAPH)
    assert linear_rounding.ellipsoid_search(graph) == []


def test_search_on_empty_graph_is_empty():
    graph = Graph.loads("2 0 0\n")
    assert linear_rounding.ellipsoid_search(graph) == []


def test_solve_without_queries():
    graph = Graph.loads(NO_QUERY_GRAPH)
    result = linear_rounding.solve(graph)
    assert result == [0, 0]
    assert graph.is_feasible(result)


def test_solve_with_unreachable_query():
    graph = Graph.loads(UNREACHABLE_GRAPH)
    result = linear_rounding.solve(graph)
    assert result == [0]
    assert graph.is_feasible(result)


def test_solve_raises_when_relaxation_fails():
    graph = Graph.loads(PATH_GRAPH)
    with pytest.raises(RuntimeError):
        linear_rounding.solve(graph)