from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_generate_exercises():
    r = client.get("/exercises", params={"count": 5, "range": 3, "seed": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["count"] == 5 and body["range"] == 3
    items = body["items"]
    assert [it["id"] for it in items] == [1, 2, 3, 4, 5]
    assert len({it["expression"] for it in items}) == 5
    first = items[0]
    assert first["line"] == f"题目1: {first['expression']} ="
    assert first["answer_line"] == f"答案1: {first['answer']}"


def test_generate_is_reproducible_with_seed():
    params = {"count": 4, "range": 7, "seed": 123}
    a = client.get("/exercises", params=params).json()
    b = client.get("/exercises", params=params).json()
    assert a["items"] == b["items"]


def test_generated_sheet_grades_clean():
    body = client.get("/exercises", params={"count": 6, "range": 9, "seed": 5}).json()
    r = client.post(
        "/grade",
        json={
            "exercises": [it["line"] for it in body["items"]],
            "answers": [it["answer_line"] for it in body["items"]],
        },
    )
    assert r.json()["correct"] == 6


def test_generate_validates_params():
    assert client.get("/exercises", params={"count": 0}).status_code == 422
    assert client.get("/exercises", params={"range": 10}).status_code == 422
    assert client.get("/exercises", params={"range": 0}).status_code == 422
    assert client.get("/exercises", params={"count": 101}).status_code == 422


def test_generate_exhausted_range():
    r = client.get("/exercises", params={"count": 100, "range": 2, "seed": 0})
    assert r.status_code == 422


def test_generate_range_one_is_exhausted():
    r = client.get("/exercises", params={"count": 1, "range": 1})
    assert r.status_code == 422
    assert "no operand" in r.json()["detail"]
