# arith/rational.py
from __future__ import annotations

import math
import re
from functools import total_ordering

from arith.errors import DivisionByZero, MalformedExpression

# "2'3/8", "3/4", "5" with an optional leading minus sign
_LITERAL_RE = re.compile(
    r"^(?P<sign>-?)(?:(?P<whole>\d+)'(?P<mnum>\d+)/(?P<mden>\d+)"
    r"|(?P<num>\d+)/(?P<den>\d+)"
    r"|(?P<int>\d+))$"
)

MIXED_SEPARATOR = "'"
FRACTION_BAR = "/"


@total_ordering
class Rational:
    """
    Exact fraction kept in lowest terms with a positive denominator.

    Instances are immutable; every operation returns a new reduced value.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZero("Denominator cannot be zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = math.gcd(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator // g)
        object.__setattr__(self, "_denominator", denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Parse "w'n/d", "n/d" or "i" (the forms produced by ``str()``).
        A leading "-" applies to the whole value, so "-1'1/2" is -3/2.
        """
        if not isinstance(text, str):
            raise MalformedExpression(f"Invalid number literal: {text!r}")
        m = _LITERAL_RE.match(text.strip())
        if m is None:
            raise MalformedExpression(f"Invalid number literal: {text!r}")

        sign = -1 if m.group("sign") else 1
        if m.group("whole") is not None:
            whole = int(m.group("whole"))
            num = int(m.group("mnum"))
            den = int(m.group("mden"))
            if den == 0:
                raise DivisionByZero(f"Zero denominator in {text!r}")
            return cls(sign * (whole * den + num), den)
        if m.group("num") is not None:
            return cls(sign * int(m.group("num")), int(m.group("den")))
        return cls(sign * int(m.group("int")), 1)

    # --- arithmetic -----------------------------------------------------------

    def add(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        if other._numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")
        return self.multiply(Rational(other._denominator, other._numerator))

    def compare_to(self, other: "Rational") -> int:
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    # --- predicates -----------------------------------------------------------

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_proper(self) -> bool:
        return abs(self._numerator) < self._denominator

    # --- python protocol ------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return (
            self._numerator == other._numerator and self._denominator == other._denominator
        )

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        if abs(self._numerator) > self._denominator:
            whole, rest = divmod(abs(self._numerator), self._denominator)
            sign = "-" if self._numerator < 0 else ""
            return f"{sign}{whole}{MIXED_SEPARATOR}{rest}{FRACTION_BAR}{self._denominator}"
        return f"{self._numerator}{FRACTION_BAR}{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def _coerce(value) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    return None


ZERO = Rational(0)
ONE = Rational(1)
