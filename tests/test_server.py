import pytest
from fastapi.testclient import TestClient

from wordgrid.server import create_app
from wordgrid.settings import settings


@pytest.fixture
def client(tmp_path, monkeypatch):
    words = tmp_path / "words.txt"
    words.write_text("CAT\nCATS\nACTS\nDOG\n")
    monkeypatch.setattr(settings, "WORD_LIST_PATH", words)
    # restored after each test even when an endpoint changes them
    for name in ("MIN_WORD_LENGTH", "MAX_RESULTS", "PARALLEL", "MAX_WORKERS", "DEBUG"):
        monkeypatch.setattr(settings, name, getattr(settings, name))
    monkeypatch.setattr(settings, "MIN_WORD_LENGTH", 1)
    monkeypatch.setattr(settings, "MAX_RESULTS", 0)
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "words_loaded": 4}


def test_solve_board_rows(client):
    resp = client.post("/solve", json={"board": [["C", "A", "T"], ["X", "S", "X"]]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["words"] == ["CATS", "CAT"]
    assert data["word_count"] == 2
    assert data["points"] == 1
    assert data["positions"] == {"CATS": [0, 0], "CAT": [0, 0]}
    assert "solve" in data["stage_timings"]


def test_solve_board_text(client):
    resp = client.post("/solve", json={"board_text": "D,O\nX,G\n"})
    assert resp.status_code == 200
    assert resp.json()["words"] == ["DOG"]


def test_repeated_solves_are_independent(client):
    board = {"board": [["C", "A", "T"]]}
    first = client.post("/solve", json=board).json()
    second = client.post("/solve", json=board).json()
    assert first["words"] == second["words"] == ["CAT"]


def test_solve_missing_board(client):
    resp = client.post("/solve", json={})
    assert resp.status_code == 400


def test_solve_empty_cell(client):
    resp = client.post("/solve", json={"board": [["C", ""], ["A", "T"]]})
    assert resp.status_code == 400
    resp = client.post("/solve", json={"board_text": "C,,A\n"})
    assert resp.status_code == 400


def test_solve_invalid_json(client):
    resp = client.post("/solve", content=b"not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400


def test_get_settings(client):
    resp = client.get("/api/settings")
    assert resp.status_code == 200
    data = resp.json()
    assert data["field_types"]["PARALLEL"] == "bool"
    assert data["settings"]["MAX_RESULTS"] == 0


def test_max_results_caps_words(client):
    resp = client.post("/api/settings", json={"MAX_RESULTS": 1})
    assert resp.status_code == 200
    data = client.post("/solve", json={"board": [["C", "A", "T"], ["X", "S", "X"]]}).json()
    assert data["words"] == ["CATS"]
    assert data["word_count"] == 2


def test_min_word_length_reloads_words(client):
    resp = client.post("/api/settings", json={"MIN_WORD_LENGTH": 4})
    assert resp.status_code == 200
    assert client.get("/health").json()["words_loaded"] == 2
    data = client.post("/solve", json={"board": [["C", "A", "T"], ["X", "S", "X"]]}).json()
    assert data["words"] == ["CATS"]


def test_post_settings_errors(client):
    resp = client.post("/api/settings", json={"LOG_LEVEL": "DEBUG"})
    assert resp.status_code == 400
    assert "LOG_LEVEL" in resp.json()["errors"]


def test_min_word_length_kept_when_reload_fails(client, tmp_path):
    (tmp_path / "words.txt").unlink()
    resp = client.post("/api/settings", json={"MIN_WORD_LENGTH": 4})
    assert resp.status_code == 400
    assert "MIN_WORD_LENGTH" in resp.json()["errors"]
    assert resp.json()["updated"]["MIN_WORD_LENGTH"] == 1
    assert settings.MIN_WORD_LENGTH == 1
    assert client.get("/health").json()["words_loaded"] == 4
    data = client.post("/solve", json={"board": [["C", "A", "T"]]}).json()
    assert data["words"] == ["CAT"]


def test_solve_reports_stage_counts(client):
    data = client.post("/solve", json={"board": [["C", "A", "T"], ["X", "S", "X"]]}).json()
    assert data["stage_counts"] == {"parse": 6, "solve": 2, "positions": 2}
