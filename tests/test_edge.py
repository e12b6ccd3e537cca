import pytest

from qos_degradation import constants, randomness
from qos_degradation.edge import Edge


def _check_weight_function(edge):
    w = edge.weight
    assert len(w) > 1
    assert w[0] == 1
    assert w[-1] == constants.T
    assert all(a < b for a, b in zip(w, w[1:]))
    assert all(x <= constants.T for x in w)


def test_random_edge_keeps_endpoints_and_valid_weights():
    randomness.seed(2024)
    for _ in range(50):
        edge = Edge.random(2, 7)
        assert (edge.u, edge.v) == (2, 7)
        _check_weight_function(edge)


def test_default_family_is_linear():
    randomness.seed(8)
    edge = Edge.random(0, 1)
    steps = [b - a for a, b in zip(edge.weight, edge.weight[1:])]
    slope = steps[0]
    assert 3 <= slope < 10
    assert all(s == slope for s in steps[:-1])
    assert steps[-1] <= slope


@pytest.mark.parametrize("edge_type", [2, 3, 4, 6])
def test_all_families_produce_valid_weights(monkeypatch, edge_type):
    monkeypatch.setattr(constants, "EDGE_TYPE", edge_type)
    randomness.seed(77)
    for _ in range(200):
        _check_weight_function(Edge.random(0, 1))


def test_cut_family_is_one_then_threshold(monkeypatch):
    monkeypatch.setattr(constants, "EDGE_TYPE", 10)
    randomness.seed(1)
    weights = [Edge.random(0, 1).weight for _ in range(300)]
    assert [1, constants.T] in weights


def test_make_weighted_respects_threshold_changes(monkeypatch):
    monkeypatch.setattr(constants, "T", 12)
    randomness.seed(4)
    edge = Edge.random(3, 4)
    assert edge.weight[-1] == 12
    assert edge.weight[0] == 1


def test_make_weighted_rejects_degenerate_threshold(monkeypatch):
    monkeypatch.setattr(constants, "T", 1)
    with pytest.raises(ValueError):
        Edge.random(0, 1)


def test_other_end():
    edge = Edge(4, 9, [1, 30])
    assert edge.other_end(4) == 9
    assert edge.other_end(9) == 4


def test_weight_helpers():
    edge = Edge(0, 1, [1, 5, 30])
    assert edge.weight_at(0) == 1
    assert edge.weight_at(2) == 30
    assert edge.linear_tan() == 4
    assert edge.linear_weight(0.0) == 1
    assert edge.linear_weight(1.0) == 5
    assert edge.linear_weight(0.5) == pytest.approx(3.0)


def test_str_format():
    edge = Edge(0, 1, [1, 4, 7])
    assert str(edge) == "0 1 3 1 4 7 "


def test_from_tokens_round_trip():
    randomness.seed(31)
    edge = Edge.random(5, 6)
    assert Edge.from_tokens(str(edge).split()) == edge


def test_from_tokens_consumes_only_its_tokens():
    tokens = iter("0 1 2 1 30 2 3 2 1 30".split())
    first = Edge.from_tokens(tokens)
    second = Edge.from_tokens(tokens)
    assert first == Edge(0, 1, [1, 30])
    assert second == Edge(2, 3, [1, 30])


def test_from_tokens_too_short_raises():
    with pytest.raises(ValueError):
        Edge.from_tokens(["0", "1", "3", "1", "4"])


def test_from_tokens_non_integer_raises():
    with pytest.raises(ValueError):
        Edge.from_tokens(["0", "x", "2", "1", "30"])