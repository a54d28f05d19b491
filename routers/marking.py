from __future__ import annotations

import logging
import re
import time
from typing import Any, Optional

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

import config
from arith.canonical import canonicalize
from arith.errors import ArithmeticExerciseError, DivisionByZero, UnknownOperator
from arith.evaluator import evaluate
from arith.grader import grade, mark_answer
from schemas.marking import (
    CanonicalizeResponse,
    EvaluateRequest,
    EvaluateResponse,
    GradeRequest,
    GradeResponse,
    MarkRequest,
    MarkResponse,
)

logger = logging.getLogger(__name__)

# --- Validation helpers --------------------------------------------------------------
_INVALID_CHARS_MSG = (
    "Only digits, spaces, ' / for fractions, + - × ÷ and parentheses are allowed."
)
_DIV_ZERO_MSG = "Expression divides by zero."
_ALLOWED_RE = re.compile(r"^[0-9'/+\-×÷()\s]+$")

router = APIRouter(tags=["marking"])


def _validate_expr(s: str) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Expression required."
    if len(s) > config.EXPR_LEN_LIMIT:
        return f"Expression too long (> {config.EXPR_LEN_LIMIT})."
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    return None


def _feedback_for(err: ArithmeticExerciseError) -> str:
    if isinstance(err, DivisionByZero):
        return _DIV_ZERO_MSG
    if isinstance(err, UnknownOperator):
        return _INVALID_CHARS_MSG
    return str(err)


# --- Endpoints --------------------------------------------------------------------


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_expr(req: EvaluateRequest):
    err = _validate_expr(req.expr)
    if err:
        return {"ok": False, "value": None, "feedback": err}
    try:
        return {"ok": True, "value": str(evaluate(req.expr))}
    except ArithmeticExerciseError as e:
        return {"ok": False, "value": None, "feedback": _feedback_for(e)}


@router.post("/canonicalize", response_model=CanonicalizeResponse)
def canonicalize_expr(req: EvaluateRequest):
    err = _validate_expr(req.expr)
    if err:
        return {"ok": False, "canonical": None, "feedback": err}
    try:
        return {"ok": True, "canonical": canonicalize(req.expr)}
    except ArithmeticExerciseError as e:
        return {"ok": False, "canonical": None, "feedback": _feedback_for(e)}


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest):
    msg = _validate_expr(req.expression)
    if msg:
        return {"ok": False, "correct": False, "score": 0, "feedback": msg, "expected": None}

    res = mark_answer(req.expression, req.answer, accept_decimal=config.ACCEPT_DECIMAL_ANSWERS)
    if res.expected is None:
        # the exercise itself is broken, not the student's answer
        return {
            "ok": False,
            "correct": False,
            "score": 0,
            "feedback": res.feedback,
            "expected": None,
        }
    return {
        "ok": True,
        "correct": res.correct,
        "score": 1 if res.correct else 0,
        "feedback": res.feedback,
        "expected": str(res.expected),
    }


@router.post("/grade", response_model=GradeResponse)
def grade_sheet(req: GradeRequest):
    t0 = time.perf_counter()

    report = grade(
        req.exercises,
        req.answers,
        error_marker=config.ANSWER_ERROR_MARKER,
        accept_decimal=config.ACCEPT_DECIMAL_ANSWERS,
    )
    results = [
        {
            "index": line.index,
            "expression": line.expression,
            "answer": line.answer,
            "correct": line.correct,
            "expected": line.expected,
            "feedback": line.feedback,
        }
        for line in report.lines
    ]

    measured_ms = int(round((time.perf_counter() - t0) * 1000))
    duration_ms = req.duration_ms if req.duration_ms is not None else measured_ms

    attempt_id = _record_attempt(
        total=report.total,
        correct=report.correct_count,
        wrong=report.wrong_count,
        items=results,
        duration_ms=duration_ms,
    )

    return {
        "ok": True,
        "total": report.total,
        "correct": report.correct_count,
        "wrong": report.wrong_count,
        "correct_indices": report.correct,
        "wrong_indices": report.wrong,
        "report": report.render_lines(),
        "results": results,
        "attempt_id": attempt_id,
        "duration_ms": duration_ms,
    }


def _record_attempt(**fields: Any) -> Optional[int]:
    from db import SessionLocal
    from models import Attempt

    try:
        with SessionLocal() as db:
            attempt = Attempt(**fields)
            db.add(attempt)
            db.commit()
            db.refresh(attempt)
            return attempt.id
    except SQLAlchemyError:
        # grading still succeeds when the store is unavailable
        logger.exception("could not record attempt")
        return None
