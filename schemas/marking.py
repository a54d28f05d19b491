# services/drills/schemas/marking.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

import config

# ---------- Evaluate / canonicalize ----------


class EvaluateRequest(BaseModel):
    expr: str


class EvaluateResponse(BaseModel):
    ok: bool
    # exact rendering, e.g. "5/6" or "1'1/2"
    value: Optional[str] = None
    feedback: Optional[str] = None


class CanonicalizeResponse(BaseModel):
    ok: bool
    canonical: Optional[str] = None
    feedback: Optional[str] = None


# ---------- Mark single ----------


class MarkRequest(BaseModel):
    expression: str
    answer: str


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    score: int
    feedback: str
    expected: Optional[str] = None


# ---------- Grade a whole sheet ----------


class GradeRequest(BaseModel):
    # raw file lines: "题目1: 1/2 + 1/3 =" and "答案1: 5/6"
    exercises: List[str] = Field(max_length=config.MAX_GRADE_LINES)
    answers: List[str] = Field(max_length=config.MAX_GRADE_LINES)
    # client-measured time wins; the server falls back to its own timing
    duration_ms: Optional[int] = None


class GradeLineOut(BaseModel):
    index: int
    expression: str
    answer: str
    correct: bool
    expected: Optional[str] = None
    feedback: str = ""


class GradeResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    wrong: int
    correct_indices: List[int]
    wrong_indices: List[int]
    report: List[str]
    results: List[GradeLineOut]
    attempt_id: Optional[int] = None
    duration_ms: Optional[int] = None
