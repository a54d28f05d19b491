# services/drills/exercise_files.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

import config
from arith.errors import ArithmeticExerciseError
from arith.evaluator import evaluate
from arith.generator import Exercise
from arith.grader import GradeReport

PathLike = Union[str, Path]


def format_exercise_line(ordinal: int, expression: str, label: Optional[str] = None) -> str:
    label = config.EXERCISE_LABEL if label is None else label
    return f"{label}{ordinal}: {expression} ="


def format_answer_line(ordinal: int, value: object, label: Optional[str] = None) -> str:
    label = config.ANSWER_LABEL if label is None else label
    return f"{label}{ordinal}: {value}"


def answer_lines_for(expressions: Iterable[str]) -> List[str]:
    """
    Recompute each answer from its expression; unevaluable entries get the
    error marker instead of aborting the file.
    """
    lines = []
    for i, expr in enumerate(expressions, 1):
        try:
            value = evaluate(expr)
        except ArithmeticExerciseError:
            value = config.ANSWER_ERROR_MARKER
        lines.append(format_answer_line(i, value))
    return lines


def read_lines(path: PathLike) -> List[str]:
    with Path(path).open("r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f]


def _write_lines(path: PathLike, lines: Iterable[str]) -> None:
    with Path(path).open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")


def write_exercises(path: PathLike, exercises: Iterable[Exercise]) -> None:
    _write_lines(
        path, (format_exercise_line(i, ex.expression) for i, ex in enumerate(exercises, 1))
    )


def write_answers(path: PathLike, exercises: Iterable[Exercise]) -> None:
    _write_lines(path, answer_lines_for(ex.expression for ex in exercises))


def write_grade(path: PathLike, report: GradeReport) -> None:
    _write_lines(path, report.render_lines())
