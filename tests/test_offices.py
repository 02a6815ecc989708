import pytest

from dsalab.offices import MAX_OFFICES, MSTEdge, OfficeNetwork, main

_COSTS = ["4", "0", "3", "5", "2", "0", "0", "1", "1", "0"]


def _example():
    network = OfficeNetwork("ABCDE")
    values = iter(int(c) for c in _COSTS)
    for i in range(5):
        for j in range(i + 1, 5):
            network.set_cost(i, j, next(values))
    return network


def test_prims_worked_example():
    assert _example().prims(0) == [
        MSTEdge("A", "D", 3),
        MSTEdge("D", "C", 1),
        MSTEdge("C", "E", 1),
        MSTEdge("C", "B", 2),
    ]


def test_total_cost_independent_of_start():
    network = _example()
    totals = {sum(e.cost for e in network.prims(s)) for s in range(5)}
    assert totals == {7}


def test_tree_spans_every_office():
    network = _example()
    for start in range(5):
        edges = network.prims(start)
        assert len(edges) == 4
        reached = {network.offices[start]} | {e.target for e in edges}
        assert reached == set("ABCDE")


def test_cost_symmetric():
    network = _example()
    assert network.cost(0, 3) == network.cost(3, 0) == 3


def test_disconnected_raises():
    network = OfficeNetwork(["x", "y", "z"])
    network.set_cost(0, 1, 2)
    with pytest.raises(ValueError):
        network.prims(0)


def test_unreachable_cost_ignored():
    network = OfficeNetwork(["x", "y"])
    network.set_cost(0, 1, 999)
    with pytest.raises(ValueError):
        network.prims(0)


def test_single_office_has_no_edges():
    assert OfficeNetwork(["only"]).prims(0) == []


def test_bad_index_and_limits():
    network = _example()
    with pytest.raises(IndexError):
        network.prims(5)
    with pytest.raises(ValueError):
        network.set_cost(2, 2, 4)
    with pytest.raises(ValueError):
        OfficeNetwork([str(i) for i in range(MAX_OFFICES + 1)])


def test_render_rows():
    lines = _example().render().splitlines()
    assert lines[0].startswith("\t\t")
    assert lines[0].split() == list("ABCDE")
    assert lines[1].split() == ["A", "0", "4", "0", "3", "5"]


def test_main_prints_total(monkeypatch, capsys):
    answers = iter(["5", "A", "B", "C", "D", "E", *_COSTS, "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "A - D : 3" in out
    assert "Total minimum cost to connect all offices: 7" in out