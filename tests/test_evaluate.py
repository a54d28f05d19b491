from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_evaluate_valid():
    r = client.post("/evaluate", json={"expr": "1/2 + 1/3"})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["value"] == "5/6"


def test_evaluate_mixed_result():
    r = client.post("/evaluate", json={"expr": "1'1/2 × 3"})
    assert r.json()["value"] == "4'1/2"


def test_evaluate_invalid_chars():
    r = client.post("/evaluate", json={"expr": "abc"})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is False
    assert "allowed" in data.get("feedback", "").lower()


def test_evaluate_len_limit():
    r = client.post("/evaluate", json={"expr": "1" * 201})
    data = r.json()
    assert data["ok"] is False


def test_evaluate_division_by_zero():
    r = client.post("/evaluate", json={"expr": "3 ÷ (1 - 1)"})
    data = r.json()
    assert data["ok"] is False
    assert "zero" in data["feedback"].lower()


def test_evaluate_malformed():
    r = client.post("/evaluate", json={"expr": "1 +"})
    assert r.json()["ok"] is False


def test_canonicalize():
    r = client.post("/canonicalize", json={"expr": "3 × (2 + 1)"})
    data = r.json()
    assert data["ok"] is True
    assert data["canonical"] == "(1 + 2) × 3"

    r = client.post("/canonicalize", json={"expr": "(1 +"})
    assert r.json()["ok"] is False
