from __future__ import annotations

import random
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

import config
from arith.errors import GenerationExhausted
from arith.generator import MAX_RANGE, MIN_RANGE, ExerciseGenerator
from exercise_files import format_answer_line, format_exercise_line
from schemas.exercises import ExerciseSetOut

router = APIRouter(tags=["exercises"])


@router.get("/exercises", response_model=ExerciseSetOut)
def generate_exercises(
    count: int = Query(default=10, ge=1, le=config.MAX_EXERCISES_PER_REQUEST),
    value_range: int = Query(default=MAX_RANGE, ge=MIN_RANGE, le=MAX_RANGE, alias="range"),
    seed: Optional[int] = Query(default=None, description="Seed for a reproducible set"),
):
    generator = ExerciseGenerator(
        value_range, random.Random(seed), max_attempts=config.GENERATION_MAX_ATTEMPTS
    )
    try:
        exercises = generator.generate(count)
    except GenerationExhausted as e:
        raise HTTPException(status_code=422, detail=str(e))

    items = [
        {
            "id": i,
            "expression": ex.expression,
            "answer": str(ex.answer),
            "line": format_exercise_line(i, ex.expression),
            "answer_line": format_answer_line(i, ex.answer),
        }
        for i, ex in enumerate(exercises, 1)
    ]
    return {"ok": True, "count": len(items), "range": value_range, "seed": seed, "items": items}
