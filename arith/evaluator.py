# arith/evaluator.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Union

from arith.errors import MalformedExpression, UnknownOperator
from arith.rational import Rational
from arith.tokenizer import DIVIDE, MINUS, PLUS, TIMES, Token, TokenKind, tokenize

PRECEDENCE: Dict[str, int] = {PLUS: 1, MINUS: 1, TIMES: 2, DIVIDE: 2}

_APPLY: Dict[str, Callable[[Rational, Rational], Rational]] = {
    PLUS: Rational.add,
    MINUS: Rational.subtract,
    TIMES: Rational.multiply,
    DIVIDE: Rational.divide,
}


def precedence(operator: str) -> int:
    try:
        return PRECEDENCE[operator]
    except KeyError:
        raise UnknownOperator(operator) from None


def _as_tokens(expression: Union[str, Iterable[Token]]) -> Iterable[Token]:
    if isinstance(expression, str):
        return tokenize(expression)
    return expression


def _shunting_yard(tokens: Iterable[Token]) -> Iterator[Token]:
    """
    Yield the tokens of an infix expression in postfix order.

    All four operators are left-associative: an operator on the stack is
    emitted before a new one of equal or lower precedence is pushed.
    """
    stack: List[Token] = []
    for tok in tokens:
        if tok.kind is TokenKind.NUMBER:
            yield tok
        elif tok.kind is TokenKind.LEFT_BRACKET:
            stack.append(tok)
        elif tok.kind is TokenKind.RIGHT_BRACKET:
            while stack and stack[-1].kind is not TokenKind.LEFT_BRACKET:
                yield stack.pop()
            if not stack:
                raise MalformedExpression("Unbalanced ')' in expression.")
            stack.pop()
        elif tok.kind is TokenKind.OPERATOR:
            prec = precedence(tok.text)
            while (
                stack
                and stack[-1].kind is TokenKind.OPERATOR
                and PRECEDENCE[stack[-1].text] >= prec
            ):
                yield stack.pop()
            stack.append(tok)
        else:
            raise UnknownOperator(tok.text)

    while stack:
        tok = stack.pop()
        if tok.kind is TokenKind.LEFT_BRACKET:
            raise MalformedExpression("Unbalanced '(' in expression.")
        yield tok


def to_postfix(expression: Union[str, Iterable[Token]]) -> List[Token]:
    return list(_shunting_yard(_as_tokens(expression)))


def apply_operator(operator: str, left: Rational, right: Rational) -> Rational:
    try:
        fn = _APPLY[operator]
    except KeyError:
        raise UnknownOperator(operator) from None
    return fn(left, right)


def evaluate_postfix(postfix: Iterable[Token]) -> Rational:
    values: List[Rational] = []
    for tok in postfix:
        if tok.kind is TokenKind.NUMBER:
            values.append(Rational.parse(tok.text))
            continue
        if len(values) < 2:
            raise MalformedExpression(f"Operator {tok.text!r} is missing an operand.")
        right = values.pop()
        left = values.pop()
        values.append(apply_operator(tok.text, left, right))

    if not values:
        raise MalformedExpression("Expression is empty.")
    if len(values) > 1:
        raise MalformedExpression("Expression has operands without an operator.")
    return values[0]


def evaluate(expression: Union[str, Iterable[Token]]) -> Rational:
    """
    Compute the exact value of an infix expression.

    Raises MalformedExpression, UnknownOperator or DivisionByZero.
    """
    return evaluate_postfix(_shunting_yard(_as_tokens(expression)))
