# services/drills/config.py
from __future__ import annotations

import os

from arith.generator import DEFAULT_MAX_ATTEMPTS
from arith.grader import DEFAULT_ERROR_MARKER


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Line labels for the exercise / answer files
EXERCISE_LABEL = os.getenv("EXERCISE_LABEL", "题目")
ANSWER_LABEL = os.getenv("ANSWER_LABEL", "答案")
ANSWER_ERROR_MARKER = os.getenv("ANSWER_ERROR_MARKER", DEFAULT_ERROR_MARKER)

# --- Generation / grading policy ---------------------------------------------------
GENERATION_MAX_ATTEMPTS = _env_int("GENERATION_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)

# If True: "0.75" is accepted for 3/4. If False: only "3/4"-style answers count.
ACCEPT_DECIMAL_ANSWERS = _env_bool("ACCEPT_DECIMAL_ANSWERS", True)

# Request size guards for the HTTP API
MAX_EXERCISES_PER_REQUEST = 100
MAX_GRADE_LINES = 1000
EXPR_LEN_LIMIT = 200

# Browser origins allowed to call the API (comma separated)
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]
