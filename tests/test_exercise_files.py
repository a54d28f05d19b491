import random

import config
from arith.generator import Exercise, ExerciseGenerator
from arith.grader import grade
from arith.rational import Rational
from exercise_files import (
    answer_lines_for,
    format_answer_line,
    format_exercise_line,
    read_lines,
    write_answers,
    write_exercises,
    write_grade,
)


def test_line_formats():
    assert format_exercise_line(1, "1/2 + 1/3") == "题目1: 1/2 + 1/3 ="
    assert format_answer_line(2, Rational(5, 6)) == "答案2: 5/6"
    assert format_answer_line(3, Rational(7, 2), label="A") == "A3: 3'1/2"


def test_unevaluable_answers_get_error_marker():
    assert answer_lines_for(["1 + 2", "3 ÷ 0"]) == [
        "答案1: 3",
        f"答案2: {config.ANSWER_ERROR_MARKER}",
    ]


def test_written_files_grade_as_all_correct(tmp_path):
    exercises = ExerciseGenerator(6, random.Random(8)).generate(12)
    ex_file = tmp_path / "Exercises.txt"
    ans_file = tmp_path / "Answers.txt"
    write_exercises(ex_file, exercises)
    write_answers(ans_file, exercises)

    ex_lines = read_lines(ex_file)
    assert len(ex_lines) == 12
    assert ex_lines[0].startswith("题目1: ") and ex_lines[0].endswith(" =")

    report = grade(ex_lines, read_lines(ans_file))
    assert report.correct == list(range(1, 13))


def test_write_grade(tmp_path):
    path = tmp_path / "Grade.txt"
    report = grade(["1 + 1 =", "3 ÷ 0 ="], ["2", "1"])
    write_grade(path, report)
    assert path.read_text(encoding="utf-8") == "Correct: 1 (1)\nWrong: 1 (2)\n"


def test_files_are_utf8(tmp_path):
    path = tmp_path / "Exercises.txt"
    write_exercises(path, [Exercise("3 ÷ 4", Rational(3, 4))])
    assert path.read_bytes() == "题目1: 3 ÷ 4 =\n".encode("utf-8")
