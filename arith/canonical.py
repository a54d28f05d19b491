# arith/canonical.py
"""
Expression trees and the canonical form used to deduplicate exercises.

Two expressions that differ only in the order of the operands of ``+`` or
``×`` (at any depth) share one canonical text. Associativity is not folded:
``1 + 2 + 3`` and ``1 + (2 + 3)`` stay distinct.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from arith.errors import MalformedExpression
from arith.evaluator import PRECEDENCE, apply_operator, to_postfix
from arith.rational import Rational
from arith.tokenizer import PLUS, TIMES, Token, TokenKind

COMMUTATIVE = (PLUS, TIMES)


@dataclass(frozen=True)
class NumberLeaf:
    value: Rational

    @property
    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperatorNode:
    operator: str
    left: "ExpressionNode"
    right: "ExpressionNode"


ExpressionNode = Union[NumberLeaf, OperatorNode]


def build_tree(postfix: Iterable[Token]) -> ExpressionNode:
    stack: List[ExpressionNode] = []
    for tok in postfix:
        if tok.kind is TokenKind.NUMBER:
            stack.append(NumberLeaf(Rational.parse(tok.text)))
            continue
        if len(stack) < 2:
            raise MalformedExpression(f"Operator {tok.text!r} is missing an operand.")
        right = stack.pop()
        left = stack.pop()
        stack.append(OperatorNode(tok.text, left, right))

    if len(stack) != 1:
        raise MalformedExpression("Postfix sequence does not reduce to one expression.")
    return stack[0]


def parse_tree(expression: Union[str, Iterable[Token]]) -> ExpressionNode:
    return build_tree(to_postfix(expression))


def evaluate_tree(node: ExpressionNode) -> Rational:
    if isinstance(node, NumberLeaf):
        return node.value
    return apply_operator(node.operator, evaluate_tree(node.left), evaluate_tree(node.right))


def _needs_brackets(child_operator: str, parent_operator: str, is_right: bool) -> bool:
    child_prec = PRECEDENCE[child_operator]
    parent_prec = PRECEDENCE[parent_operator]
    # a right operand of equal precedence would otherwise re-associate to the left
    return child_prec < parent_prec or (is_right and child_prec == parent_prec)


def render(node: ExpressionNode, parent_operator: Optional[str] = None, is_right: bool = False) -> str:
    """
    Render a tree as infix text with the fewest brackets that re-parse to
    the same tree. ``parent_operator`` is the operator of the enclosing node.
    """
    if isinstance(node, NumberLeaf):
        return node.text

    text = (
        f"{render(node.left, node.operator, False)} "
        f"{node.operator} "
        f"{render(node.right, node.operator, True)}"
    )
    if parent_operator is not None and _needs_brackets(node.operator, parent_operator, is_right):
        return f"({text})"
    return text


def compare_nodes(a: ExpressionNode, b: ExpressionNode) -> int:
    if isinstance(a, NumberLeaf) and isinstance(b, NumberLeaf):
        return a.value.compare_to(b.value)
    ta, tb = render(a), render(b)
    return (ta > tb) - (ta < tb)


def canonicalize_tree(node: ExpressionNode) -> ExpressionNode:
    if isinstance(node, NumberLeaf):
        return node

    left = canonicalize_tree(node.left)
    right = canonicalize_tree(node.right)
    if node.operator in COMMUTATIVE and compare_nodes(left, right) > 0:
        left, right = right, left
    return OperatorNode(node.operator, left, right)


def canonicalize(expression: Union[str, Iterable[Token]]) -> str:
    return render(canonicalize_tree(parse_tree(expression)))
