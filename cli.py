#!/usr/bin/env python
# services/drills/cli.py
"""
Generate exercise/answer files, or grade an answer file against exercises.

    python cli.py -n 10 -r 9 -e Exercises.txt -a Answers.txt
    python cli.py -e Exercises.txt -a Answers.txt -g Grade.txt
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

import config
from arith.errors import GenerationExhausted
from arith.generator import MAX_RANGE, MIN_RANGE, ExerciseGenerator
from arith.grader import grade
from exercise_files import read_lines, write_answers, write_exercises, write_grade

logger = logging.getLogger("drills.cli")

DEFAULT_EXERCISE_FILE = "Exercises.txt"
DEFAULT_ANSWER_FILE = "Answers.txt"
DEFAULT_GRADE_FILE = "Grade.txt"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="drills",
        description="Arithmetic exercise generator and grader.",
    )
    p.add_argument("-n", type=int, dest="count", help="number of exercises to generate")
    p.add_argument(
        "-r",
        type=int,
        dest="value_range",
        help=f"operand range, {MIN_RANGE}..{MAX_RANGE} (exclusive upper bound on operands)",
    )
    p.add_argument("-e", dest="exercise_file", help="exercise file")
    p.add_argument("-a", dest="answer_file", help="answer file")
    p.add_argument("-g", dest="grade_file", help="grade report file (grading mode)")
    p.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    return p


def _generate(args: argparse.Namespace) -> int:
    generator = ExerciseGenerator(
        args.value_range,
        random.Random(args.seed),
        max_attempts=config.GENERATION_MAX_ATTEMPTS,
    )
    try:
        exercises = generator.generate(args.count)
    except GenerationExhausted as e:
        logger.error("%s", e)
        return 1

    exercise_file = args.exercise_file or DEFAULT_EXERCISE_FILE
    answer_file = args.answer_file or DEFAULT_ANSWER_FILE
    try:
        write_exercises(exercise_file, exercises)
        write_answers(answer_file, exercises)
    except OSError as e:
        logger.error("could not write output: %s", e)
        return 1

    print(f"Wrote {len(exercises)} exercises to {exercise_file} and answers to {answer_file}")
    return 0


def _grade(args: argparse.Namespace) -> int:
    grade_file = args.grade_file or DEFAULT_GRADE_FILE
    try:
        exercise_lines = read_lines(args.exercise_file)
        answer_lines = read_lines(args.answer_file)
    except OSError as e:
        logger.error("could not read input: %s", e)
        return 1

    if len(answer_lines) < len(exercise_lines):
        logger.warning(
            "answer file has %d line(s) for %d exercise(s); grading the first %d",
            len(answer_lines),
            len(exercise_lines),
            len(answer_lines),
        )

    report = grade(
        exercise_lines,
        answer_lines,
        error_marker=config.ANSWER_ERROR_MARKER,
        accept_decimal=config.ACCEPT_DECIMAL_ANSWERS,
    )
    try:
        write_grade(grade_file, report)
    except OSError as e:
        logger.error("could not write grade file: %s", e)
        return 1

    print(f"Graded {report.total} exercise(s): {report.correct_count} correct, "
          f"{report.wrong_count} wrong. Report written to {grade_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL)
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count is not None or args.value_range is not None:
        if args.count is None or args.value_range is None:
            parser.error("-n and -r must be given together")
        if args.count < 1:
            parser.error("-n must be greater than 0")
        if not MIN_RANGE <= args.value_range <= MAX_RANGE:
            parser.error(f"-r must be between {MIN_RANGE} and {MAX_RANGE}")
        return _generate(args)

    if args.exercise_file and args.answer_file:
        return _grade(args)

    parser.error("use -n/-r to generate, or -e/-a [-g] to grade")
    return 2


if __name__ == "__main__":
    sys.exit(main())
