from fastapi.testclient import TestClient

from wordstack.main import app, sessions
from wordstack.managers.game import GameSession


def test_health_reports_loaded_dictionary():
    with TestClient(app) as client:
        body = client.get("/health").json()
    assert body["dictionaryLoaded"] is True
    assert body["dictionarySize"] > 0


def test_dictionary_lookup():
    with TestClient(app) as client:
        assert client.get("/dict/validate", params={"word": "CAT"}).json() == {"word": "cat", "valid": True}
        assert client.get("/dict/validate", params={"word": "xqzz"}).json()["valid"] is False


def test_unknown_session_is_404():
    with TestClient(app) as client:
        assert client.get("/sessions/missing").status_code == 404


def test_session_snapshot_endpoint():
    session = GameSession("rest-sid", sessions.dictionary)
    sessions.sessions["rest-sid"] = session
    try:
        with TestClient(app) as client:
            body = client.get("/sessions/rest-sid").json()
    finally:
        sessions.sessions.pop("rest-sid", None)
    assert body["id"] == "rest-sid"
    assert body["feedback"] == "typing"
    assert len(body["stack"]) == 7
    assert body["bagCount"] == 81
