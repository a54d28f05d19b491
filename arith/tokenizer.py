# arith/tokenizer.py
from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple

PLUS = "+"
MINUS = "-"
TIMES = "×"
DIVIDE = "÷"
LEFT_BRACKET = "("
RIGHT_BRACKET = ")"

OPERATORS = (PLUS, MINUS, TIMES, DIVIDE)
_NUMERAL_CHARS = set("0123456789'/")


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    SYMBOL = "symbol"  # anything else; rejected by the evaluator


class Token(NamedTuple):
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text


def tokenize(source: str) -> List[Token]:
    """
    Split an expression into numerals, operators and brackets.

    A numeral is a maximal run of digits, "'" and "/", so "2'3/8" is one
    token. Placement is not validated here.
    """
    tokens: List[Token] = []
    current: List[str] = []

    def flush() -> None:
        if current:
            tokens.append(Token(TokenKind.NUMBER, "".join(current)))
            current.clear()

    for ch in source:
        if ch in _NUMERAL_CHARS:
            current.append(ch)
            continue
        flush()
        if ch.isspace():
            continue
        if ch in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, ch))
        elif ch == LEFT_BRACKET:
            tokens.append(Token(TokenKind.LEFT_BRACKET, ch))
        elif ch == RIGHT_BRACKET:
            tokens.append(Token(TokenKind.RIGHT_BRACKET, ch))
        else:
            tokens.append(Token(TokenKind.SYMBOL, ch))
    flush()
    return tokens
