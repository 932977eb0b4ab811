# src/e2e/test_frontend_api_json.py

import pytest

import frontend.web as webmod
from frontend.web import app as flask_app

FRUITS = ["apple", "banana", "grape", "orange", "pineapple", "apricot"]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(webmod, "_items", list(FRUITS))
    return flask_app.test_client()


@pytest.mark.e2e
def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "items": 6}


@pytest.mark.e2e
def test_score_get_and_post(client):
    r = client.get("/api/score?a=app&b=apple")
    assert r.status_code == 200
    assert r.get_json() == {"score": 75, "scorer": "standard"}

    r = client.post("/api/score", json={"a": "abcd", "b": "XXXbcdeEEE", "scorer": "partial"})
    assert r.get_json()["score"] == 75

    r = client.post("/api/score", json={"a": "Apple", "b": "apple pie",
                                        "scorer": "token_set", "full_process": False})
    assert r.get_json()["score"] < 100


@pytest.mark.e2e
def test_score_unknown_scorer(client):
    r = client.get("/api/score?a=x&b=y&scorer=nope")
    assert r.status_code == 400
    assert r.get_json()["error"] == "invalid_scorer"


@pytest.mark.e2e
def test_sort(client):
    r = client.get("/api/sort?q=app&k=3")
    assert r.status_code == 200
    data = r.get_json()
    assert [row["element"] for row in data] == ["apple", "grape", "pineapple"]
    assert data[0]["score"] == 75


@pytest.mark.e2e
def test_sort_errors_are_typed(client):
    r = client.get("/api/sort?q=app&floor=-1")
    assert r.status_code == 400
    assert r.get_json()["error"] == "invalid_floor"

    r = client.get("/api/sort?q=")
    assert r.status_code == 400
    assert r.get_json()["error"] == "empty_query"


@pytest.mark.e2e
def test_too_long_input(client, monkeypatch):
    monkeypatch.setattr(webmod.CFG, "MAX_INPUT_UNITS", 5)
    r = client.get("/api/score?a=abcdefgh&b=x")
    assert r.status_code == 413


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "<form" in r.data.decode("utf-8").lower()


@pytest.mark.e2e
def test_load_items(tmp_path, monkeypatch):
    monkeypatch.setattr(webmod, "_items", [])
    f = tmp_path / "items.txt"
    f.write_text("alpha\n\nbeta\n", encoding="utf-8")
    assert webmod.load_items(str(f)) == 2
    assert webmod._items == ["alpha", "beta"]


@pytest.mark.e2e
@pytest.mark.parametrize("body", [["app", "apple"], "app", 3])
def test_score_post_rejects_non_object_body(client, body):
    r = client.post("/api/score", json=body)
    assert r.status_code == 400
    assert r.get_json()["error"] == "invalid_body"


@pytest.mark.e2e
def test_load_items_skips_overlong_lines(tmp_path, monkeypatch):
    monkeypatch.setattr(webmod, "_items", [])
    monkeypatch.setattr(webmod.CFG, "MAX_INPUT_UNITS", 5)
    f = tmp_path / "items.txt"
    f.write_text("alpha\nabcdefgh\nbeta\n", encoding="utf-8")
    assert webmod.load_items(str(f)) == 2
    assert webmod._items == ["alpha", "beta"]
