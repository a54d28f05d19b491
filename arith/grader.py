# arith/grader.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import sympy

from arith.errors import ArithmeticExerciseError
from arith.evaluator import evaluate
from arith.rational import Rational

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MARKER = "错误 (除零或无效表达式)"

_DECIMAL_RE = re.compile(r"^\d+\.\d+$")


def strip_label(line: str) -> str:
    """Drop a leading "<label><n>:" prefix, if any."""
    _, sep, rest = line.replace("：", ":").partition(":")
    return rest.strip() if sep else line.strip()


def exercise_expression(line: str) -> str:
    expr = strip_label(line)
    if expr.endswith("="):
        expr = expr[:-1]
    return expr.strip()


def parse_answer(text: str, accept_decimal: bool = True) -> Rational:
    """
    Parse a submitted answer. Canonical renderings ("2'1/2", "5/6", "3") are
    always accepted; terminating decimals ("0.75") only with ``accept_decimal``.
    """
    s = text.strip()
    if accept_decimal and _DECIMAL_RE.match(s):
        val = sympy.Rational(s)
        return Rational(int(val.p), int(val.q))
    return Rational.parse(s)


@dataclass(frozen=True)
class MarkResult:
    correct: bool
    expected: Optional[Rational]
    feedback: str = ""


def mark_answer(expression: str, answer: str, accept_decimal: bool = True) -> MarkResult:
    try:
        expected = evaluate(expression)
    except ArithmeticExerciseError as e:
        return MarkResult(False, None, f"Exercise cannot be evaluated: {e}")

    try:
        given = parse_answer(answer, accept_decimal=accept_decimal)
    except ArithmeticExerciseError as e:
        return MarkResult(False, expected, f"Answer is not a number: {e}")

    if given == expected:
        return MarkResult(True, expected)
    return MarkResult(False, expected)


@dataclass(frozen=True)
class LineResult:
    index: int
    expression: str
    answer: str
    correct: bool
    expected: Optional[str] = None
    feedback: str = ""


@dataclass
class GradeReport:
    correct: List[int] = field(default_factory=list)
    wrong: List[int] = field(default_factory=list)
    lines: List[LineResult] = field(default_factory=list)

    @property
    def correct_count(self) -> int:
        return len(self.correct)

    @property
    def wrong_count(self) -> int:
        return len(self.wrong)

    @property
    def total(self) -> int:
        return len(self.correct) + len(self.wrong)

    def render_lines(self) -> List[str]:
        return [_summary("Correct", self.correct), _summary("Wrong", self.wrong)]

    def __str__(self) -> str:
        return "\n".join(self.render_lines())


def _summary(title: str, indices: List[int]) -> str:
    if not indices:
        return f"{title}: 0"
    return f"{title}: {len(indices)} ({', '.join(str(i) for i in indices)})"


def grade(
    exercise_lines: Iterable[str],
    answer_lines: Iterable[str],
    *,
    error_marker: str = DEFAULT_ERROR_MARKER,
    accept_decimal: bool = True,
) -> GradeReport:
    """
    Pair exercise and answer lines by position (1-indexed) and classify each
    pair. Stops at the shorter input; a bad line is counted wrong and never
    aborts the run.
    """
    report = GradeReport()
    for index, (ex_line, ans_line) in enumerate(zip(exercise_lines, answer_lines), 1):
        expression = exercise_expression(ex_line)
        answer = strip_label(ans_line)

        if error_marker and error_marker in answer:
            result = MarkResult(False, None, "Answer is marked as an error.")
        else:
            result = mark_answer(expression, answer, accept_decimal=accept_decimal)

        if result.feedback:
            logger.warning("line %d graded wrong: %s", index, result.feedback)

        (report.correct if result.correct else report.wrong).append(index)
        report.lines.append(
            LineResult(
                index=index,
                expression=expression,
                answer=answer,
                correct=result.correct,
                expected=str(result.expected) if result.expected is not None else None,
                feedback=result.feedback,
            )
        )
    return report
