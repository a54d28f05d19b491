# arith/__init__.py
from arith.canonical import canonicalize
from arith.errors import (
    ArithmeticExerciseError,
    DivisionByZero,
    GenerationExhausted,
    MalformedExpression,
    UnknownOperator,
)
from arith.evaluator import evaluate
from arith.generator import Exercise, ExerciseGenerator
from arith.grader import GradeReport, grade
from arith.rational import Rational

__all__ = [
    "ArithmeticExerciseError",
    "DivisionByZero",
    "Exercise",
    "ExerciseGenerator",
    "GenerationExhausted",
    "GradeReport",
    "MalformedExpression",
    "Rational",
    "UnknownOperator",
    "canonicalize",
    "evaluate",
    "grade",
]
