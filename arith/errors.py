# arith/errors.py
from __future__ import annotations


class ArithmeticExerciseError(ValueError):
    """Base class for every failure raised by the arithmetic core."""


class DivisionByZero(ArithmeticExerciseError, ZeroDivisionError):
    """Zero denominator on construction, or division by a zero value."""


class MalformedExpression(ArithmeticExerciseError):
    """Token stream does not describe a single well-formed expression."""


class UnknownOperator(MalformedExpression):
    def __init__(self, symbol: str):
        super().__init__(f"Unknown operator: {symbol!r}")
        self.symbol = symbol


class GenerationExhausted(ArithmeticExerciseError):
    """Retry ceiling reached before enough valid exercises were produced."""
