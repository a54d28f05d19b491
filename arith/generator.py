# arith/generator.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from arith.canonical import (
    ExpressionNode,
    NumberLeaf,
    canonicalize_tree,
    parse_tree,
    render,
)
from arith.errors import ArithmeticExerciseError, GenerationExhausted
from arith.evaluator import apply_operator
from arith.rational import Rational
from arith.tokenizer import DIVIDE, MINUS, OPERATORS, PLUS, TIMES

logger = logging.getLogger(__name__)

MIN_RANGE = 1
MAX_RANGE = 9
MAX_OPERATORS = 3

DEFAULT_MAX_ATTEMPTS = 500
DEFAULT_STEP_RETRIES = 10
# differences below this are "too close to zero" for a subtraction step
DEFAULT_MIN_DIFFERENCE = Rational(1, 10)


@dataclass(frozen=True)
class Exercise:
    expression: str  # canonical text
    answer: Rational


@dataclass(frozen=True)
class Accepted:
    exercise: Exercise


@dataclass(frozen=True)
class Retry:
    operator_count: int


AttemptResult = Union[Accepted, Retry]


class _Rejected(Exception):
    pass


def _expression_text(
    operands: Sequence[Rational], operators: Sequence[str], bracket: Optional[int] = None
) -> str:
    """
    Join operands and operators left to right. ``bracket`` is the index of an
    operator to wrap in parentheses together with its two neighbours.
    """
    parts = [str(operands[0])]
    for i, op in enumerate(operators):
        parts.append(op)
        parts.append(str(operands[i + 1]))
    if bracket is not None:
        first = 2 * bracket
        last = first + 2
        parts[first] = "(" + parts[first]
        parts[last] = parts[last] + ")"
    return " ".join(parts)


class ExerciseGenerator:
    """
    Draws random exercises whose every intermediate step respects the
    classroom constraints: no negative differences, proper-fraction quotients,
    bounded products and sums.
    """

    def __init__(
        self,
        value_range: int,
        rng: Optional[random.Random] = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        step_retries: int = DEFAULT_STEP_RETRIES,
        min_difference: Rational = DEFAULT_MIN_DIFFERENCE,
        max_denominator: Optional[int] = None,
    ):
        if not isinstance(value_range, int) or not MIN_RANGE <= value_range <= MAX_RANGE:
            raise ValueError(f"range must be an integer between {MIN_RANGE} and {MAX_RANGE}.")
        if max_attempts < 1 or step_retries < 1:
            raise ValueError("max_attempts and step_retries must be positive.")

        self.value_range = value_range
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.step_retries = step_retries
        self.min_difference = min_difference
        self.max_denominator = max_denominator or value_range * value_range

    # --- drawing --------------------------------------------------------------

    def random_operand(self) -> Rational:
        top = self.value_range - 1
        if self.rng.random() < 0.5:
            return Rational(self.rng.randint(1, top))
        # n >= d renders as a mixed number (or an integer) instead of being redrawn
        return Rational(self.rng.randint(1, top), self.rng.randint(1, top))

    def random_operator(self) -> str:
        return self.rng.choice(OPERATORS)

    # --- validation -----------------------------------------------------------

    def _check_step(self, operator: str, left: Rational, right: Rational) -> Rational:
        result = apply_operator(operator, left, right)
        if operator == MINUS:
            if result < self.min_difference:
                raise _Rejected("difference too small")
        elif operator == DIVIDE:
            if left >= right:
                raise _Rejected("quotient is not a proper fraction")
            if result.denominator > self.max_denominator:
                raise _Rejected("quotient denominator too large")
        elif operator == TIMES:
            if not left.is_integer() and not right.is_integer():
                raise _Rejected("fraction times fraction")
            if result > self.value_range:
                raise _Rejected("product too large")
        elif operator == PLUS:
            if result > 2 * self.value_range:
                raise _Rejected("sum too large")
        return result

    def _checked_value(self, node: ExpressionNode) -> Rational:
        if isinstance(node, NumberLeaf):
            return node.value
        left = self._checked_value(node.left)
        right = self._checked_value(node.right)
        return self._check_step(node.operator, left, right)

    def validated_value(self, expression: str) -> Optional[Rational]:
        """Value of ``expression`` if every step passes, else None."""
        try:
            return self._checked_value(parse_tree(expression))
        except (_Rejected, ArithmeticExerciseError):
            return None

    def is_valid_result(self, result: Rational) -> bool:
        if result.numerator < 0 or result.denominator < 0:
            return False
        if result > self.value_range * self.value_range:
            return False
        if not result.is_integer():
            return result.is_proper()
        return True

    # --- construction ---------------------------------------------------------

    def _maybe_bracket(
        self, operands: List[Rational], operators: List[str], value: Rational
    ) -> str:
        plain = _expression_text(operands, operators)
        if len(operators) < 2 or self.rng.random() >= 0.5:
            return plain
        candidates = [i for i, op in enumerate(operators) if op in (PLUS, MINUS)]
        if not candidates:
            return plain
        bracketed = _expression_text(operands, operators, self.rng.choice(candidates))
        if self.validated_value(bracketed) == value:
            return bracketed
        return plain

    def attempt(self, operator_count: int) -> AttemptResult:
        operands = [self.random_operand()]
        operators: List[str] = []
        value = operands[0]

        for _ in range(operator_count):
            for _ in range(self.step_retries):
                op = self.random_operator()
                operand = self.random_operand()
                candidate = self.validated_value(
                    _expression_text(operands + [operand], operators + [op])
                )
                if candidate is not None:
                    operands.append(operand)
                    operators.append(op)
                    value = candidate
                    break
            else:
                logger.debug(
                    "no valid step after %d draws; retrying with %d operator(s)",
                    self.step_retries,
                    max(1, operator_count - 1),
                )
                return Retry(max(1, operator_count - 1))

        if not self.is_valid_result(value):
            return Retry(operator_count)

        text = self._maybe_bracket(operands, operators, value)
        canonical = render(canonicalize_tree(parse_tree(text)))
        return Accepted(Exercise(canonical, value))

    def generate_one(self) -> Exercise:
        if self.value_range - 1 < 1:
            raise GenerationExhausted(
                f"Range {self.value_range} leaves no operand to draw from."
            )
        operator_count = self.rng.randint(1, MAX_OPERATORS)
        for _ in range(self.max_attempts):
            result = self.attempt(operator_count)
            if isinstance(result, Accepted):
                return result.exercise
            operator_count = result.operator_count
        raise GenerationExhausted(
            f"No valid exercise for range {self.value_range} after {self.max_attempts} attempts."
        )

    def generate(self, count: int) -> List[Exercise]:
        """
        Produce ``count`` exercises with pairwise distinct canonical forms.

        Raises GenerationExhausted once ``max_attempts`` candidates in a row
        are duplicates, i.e. the range cannot supply that many exercises.
        """
        if not isinstance(count, int) or count < 1:
            raise ValueError("count must be a positive integer.")

        exercises: Dict[str, Exercise] = {}
        drawn = 0
        stale = 0
        while len(exercises) < count:
            if stale >= self.max_attempts:
                logger.warning(
                    "generation exhausted: %d of %d exercises after %d candidates",
                    len(exercises),
                    count,
                    drawn,
                )
                raise GenerationExhausted(
                    f"Only {len(exercises)} distinct exercises could be generated "
                    f"for range {self.value_range} (wanted {count})."
                )
            drawn += 1
            exercise = self.generate_one()
            if exercise.expression in exercises:
                stale += 1
                continue
            exercises[exercise.expression] = exercise
            stale = 0

        logger.debug("generated %d exercises from %d candidates", count, drawn)
        return list(exercises.values())
