import io

import pytest

from dsalab.obst import optimal_bst, optimal_bst_cost, main


def test_worked_example():
    assert optimal_bst_cost([0.2, 0.5, 0.3]) == pytest.approx(1.5)


def test_worked_example_root():
    assert optimal_bst([0.2, 0.5, 0.3]).roots[(1, 3)] == 2


def test_no_keys_costs_nothing():
    result = optimal_bst([])
    assert result.cost == 0
    assert result.roots == {}


def test_single_key_costs_its_probability():
    assert optimal_bst_cost([0.4]) == pytest.approx(0.4)
    assert optimal_bst([0.4]).roots == {(1, 1): 1}


@pytest.mark.parametrize(
    "probabilities",
    [[0.1, 0.2, 0.3, 0.4], [0.25, 0.25, 0.25, 0.25], [0.5, 0.1, 0.05, 0.3, 0.05]],
)
def test_roots_lie_within_ranges(probabilities):
    result = optimal_bst(probabilities)
    n = len(probabilities)
    assert len(result.roots) == n * (n + 1) // 2
    assert all(i <= r <= j for (i, j), r in result.roots.items())


@pytest.mark.parametrize(
    "probabilities",
    [[0.1, 0.2, 0.3, 0.4], [0.5, 0.1, 0.05, 0.3, 0.05]],
)
def test_cost_bounds_and_symmetry(probabilities):
    cost = optimal_bst_cost(probabilities)
    assert cost >= sum(probabilities) - 1e-9
    assert cost == pytest.approx(optimal_bst_cost(list(reversed(probabilities))))


def test_main_prints_cost(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0.2\n0.5\n0.3\n"))
    assert main([]) == 0
    assert "Minimum cost of Optimal BST: 1.5" in capsys.readouterr().out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("two\n"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().out