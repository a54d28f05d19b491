from fastapi.testclient import TestClient

from db import SessionLocal
from main import app
from models import Attempt

client = TestClient(app)

EXERCISES = ["题目1: 1/2 + 1/3 =", "题目2: 3 ÷ 0 =", "题目3: 2 × 3 ="]
ANSWERS = ["答案1: 5/6", "答案2: 1", "答案3: 5"]


def test_grade_sheet():
    r = client.post("/grade", json={"exercises": EXERCISES, "answers": ANSWERS})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["total"] == 3
    assert body["correct"] == 1 and body["wrong"] == 2
    assert body["correct_indices"] == [1]
    assert body["wrong_indices"] == [2, 3]
    assert body["report"] == ["Correct: 1 (1)", "Wrong: 2 (2, 3)"]
    assert [res["expected"] for res in body["results"]] == ["5/6", None, "6"]


def test_grade_stops_at_shorter_input():
    r = client.post("/grade", json={"exercises": EXERCISES, "answers": ANSWERS[:1]})
    body = r.json()
    assert body["total"] == 1
    assert body["report"] == ["Correct: 1 (1)", "Wrong: 0"]


def test_grade_records_attempt_with_duration():
    r = client.post("/grade", json={"exercises": EXERCISES, "answers": ANSWERS})
    body = r.json()
    attempt_id = body.get("attempt_id")
    assert isinstance(attempt_id, int)

    db = SessionLocal()
    try:
        a = db.query(Attempt).filter(Attempt.id == attempt_id).first()
        assert a is not None
        assert a.total == 3 and a.correct == 1 and a.wrong == 2
        assert isinstance(a.duration_ms, int)
        assert a.duration_ms >= 0
        assert len(a.items) == 3
    finally:
        db.close()


def test_grade_keeps_client_duration():
    r = client.post(
        "/grade", json={"exercises": EXERCISES, "answers": ANSWERS, "duration_ms": 1234}
    )
    assert r.json()["duration_ms"] == 1234


def test_grade_rejects_oversized_sheet():
    lines = ["1 + 1 ="] * 1001
    r = client.post("/grade", json={"exercises": lines, "answers": ["2"] * 1001})
    assert r.status_code == 422
