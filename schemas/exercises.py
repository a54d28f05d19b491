# services/drills/schemas/exercises.py
from typing import List, Optional

from pydantic import BaseModel


class ExerciseOut(BaseModel):
    id: int
    expression: str
    answer: str
    # ready-to-write file lines
    line: str
    answer_line: str


class ExerciseSetOut(BaseModel):
    ok: bool
    count: int
    range: int
    seed: Optional[int] = None
    items: List[ExerciseOut]
