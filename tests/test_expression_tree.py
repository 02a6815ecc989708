import pytest

from dsalab.expression_tree import (
    ExprNode,
    build_from_prefix,
    is_operator,
    main,
    postorder,
)


def feed(monkeypatch, answers):
    it = iter(answers)

    def fake(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake)


def preorder(node):
    if node is None:
        return ""
    return node.data + preorder(node.left) + preorder(node.right)


def count(node):
    if node is None:
        return 0
    return 1 + count(node.left) + count(node.right)


@pytest.mark.parametrize("ch", list("+-*/^"))
def test_operators(ch):
    assert is_operator(ch) is True


@pytest.mark.parametrize("ch", ["a", "%", "(", "1", "++"])
def test_non_operators(ch):
    assert is_operator(ch) is False


def test_simple_tree_shape():
    root = build_from_prefix("+ab")
    assert root.data == "+"
    assert root.left.data == "a"
    assert root.right.data == "b"


def test_postorder_simple():
    assert postorder(build_from_prefix("+ab")) == ["a", "b", "+"]


def test_postorder_nested():
    assert postorder(build_from_prefix("*+abc")) == ["a", "b", "+", "c", "*"]


@pytest.mark.parametrize("prefix", ["+ab", "*+abc", "-+a*bcd", "^/ab-cd", "x"])
def test_preorder_round_trip(prefix):
    root = build_from_prefix(prefix)
    assert preorder(root) == prefix


@pytest.mark.parametrize("prefix", ["+ab", "*+abc", "-+a*bcd"])
def test_postorder_covers_all_nodes(prefix):
    root = build_from_prefix(prefix)
    result = postorder(root)
    assert len(result) == count(root)
    assert result[-1] == root.data
    assert sorted(result) == sorted(prefix)


def test_other_characters_ignored():
    assert postorder(build_from_prefix("+a1 b")) == postorder(build_from_prefix("+ab"))


def test_empty_and_digits_give_no_tree():
    assert build_from_prefix("") is None
    assert build_from_prefix("9") is None
    assert postorder(None) == []


def test_operator_without_operands():
    root = build_from_prefix("+")
    assert root == ExprNode("+")
    assert postorder(root) == ["+"]


def test_main_session(monkeypatch, capsys):
    feed(monkeypatch, ["1", "+ab", "2", "3"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Postorder: a b +" in out
    assert "Deleted nodes successfully" in out