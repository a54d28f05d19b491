import pytest

from arith.canonical import (
    NumberLeaf,
    OperatorNode,
    build_tree,
    canonicalize,
    parse_tree,
    render,
)
from arith.errors import MalformedExpression
from arith.evaluator import evaluate
from arith.rational import Rational

SAMPLES = [
    "2 + 3",
    "3 × 1/2",
    "3 × (2 + 1)",
    "1 + 2 + 3",
    "1 + (2 + 3)",
    "5 - (2 - 1)",
    "6 ÷ (2 × 3)",
    "(3 + 1) × (2 + 1/2)",
    "1'1/2 + 1/2 × 4 - 1",
    "1/3 ÷ (2 - 1/2) + 7 × 1/7",
]


def test_commutative_operands_share_a_form():
    assert canonicalize("2 + 3") == canonicalize("3 + 2") == "2 + 3"
    assert canonicalize("1/2 × 3") == canonicalize("3 × 1/2") == "1/2 × 3"


def test_commutation_at_any_depth():
    assert canonicalize("3 × (2 + 1)") == canonicalize("(1 + 2) × 3") == "(1 + 2) × 3"
    assert canonicalize("(3 + 1) × (2 + 1/2)") == canonicalize("(1/2 + 2) × (1 + 3)")
    assert canonicalize("4 - 2 × 1/2") == canonicalize("4 - 1/2 × 2")


def test_leaves_compare_by_value():
    assert canonicalize("10 + 9") == "9 + 10"
    assert canonicalize("1'1/2 + 1/2") == "1/2 + 1'1/2"
    assert canonicalize("2/4 + 1") == "1/2 + 1"


def test_non_commutative_operators_keep_order():
    assert canonicalize("3 - 2") == "3 - 2"
    assert canonicalize("2 ÷ 3") != canonicalize("3 ÷ 2")


def test_associativity_is_not_folded():
    assert canonicalize("1 + 2 + 3") == "1 + 2 + 3"
    assert canonicalize("1 + (2 + 3)") == "1 + (2 + 3)"


def test_brackets_only_where_needed():
    assert canonicalize("(1 × 2) + 3") == "1 × 2 + 3"
    assert canonicalize("5 - (2 - 1)") == "5 - (2 - 1)"
    assert canonicalize("6 ÷ (2 × 3)") == "6 ÷ (2 × 3)"
    assert canonicalize("((1 + 2))") == "1 + 2"


@pytest.mark.parametrize("expr", SAMPLES)
def test_idempotent(expr):
    once = canonicalize(expr)
    assert canonicalize(once) == once


@pytest.mark.parametrize("expr", SAMPLES)
def test_value_preserved(expr):
    assert evaluate(canonicalize(expr)) == evaluate(expr)


def test_tree_shape():
    tree = parse_tree("1 + 2 × 3")
    assert tree == OperatorNode(
        "+",
        NumberLeaf(Rational(1)),
        OperatorNode("×", NumberLeaf(Rational(2)), NumberLeaf(Rational(3))),
    )


def test_render_takes_parent_operator():
    node = parse_tree("1 + 2")
    assert render(node) == "1 + 2"
    assert render(node, "×") == "(1 + 2)"
    assert render(node, "+", is_right=True) == "(1 + 2)"
    assert render(node, "+") == "1 + 2"


def test_build_tree_rejects_bad_postfix():
    with pytest.raises(MalformedExpression):
        build_tree([])
    with pytest.raises(MalformedExpression):
        canonicalize("1 +")
