"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient
from api.main import create_app
from config import Settings
from remote import RemoteUnavailable
from translator import Translator


class StubAsyncRemote:
    def __init__(self, result=None, reason=None):
        self.result = result
        self.reason = reason
        self.calls = 0

    async def resolve(self, text, source_lang, target_lang):
        self.calls += 1
        if self.reason:
            raise RemoteUnavailable(self.reason)
        return self.result


@pytest.fixture
def app():
    return create_app(Settings(offline=True))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["translate"] == "/api/v1/translate"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] in ("healthy", "degraded")


def test_languages(client):
    response = client.get("/api/v1/languages")
    languages = response.json()["languages"]
    assert languages[0] == {"code": "en", "name": "English"}
    assert len(languages) == 15


def test_translate_offline(client):
    response = client.post("/api/v1/translate", json={"q": "Hello", "source": "en", "target": "es"})
    assert response.status_code == 200
    assert response.json() == {"translatedText": "hola", "source": "en", "target": "es"}


def test_translate_same_language(client):
    response = client.post("/api/v1/translate", json={"q": "Hello", "source": "de", "target": "de"})
    assert response.json()["translatedText"] == "Hello"


def test_translate_remote(app, client):
    remote = StubAsyncRemote(result="Guten Morgen!")
    app.state.translator = Translator(async_remote=remote)

    response = client.post("/api/v1/translate", json={"q": "Good morning!", "source": "en", "target": "de"})

    assert response.json()["translatedText"] == "Guten Morgen!"
    assert remote.calls == 1


def test_translate_remote_down(app, client):
    app.state.translator = Translator(async_remote=StubAsyncRemote(reason="HTTP 503"))
    response = client.post("/api/v1/translate", json={"q": "well hello there", "source": "en", "target": "es"})
    assert response.status_code == 200
    assert response.json()["translatedText"] == "hola (contains: hello)"


@pytest.mark.parametrize("body", [
    {"q": "   ", "source": "en", "target": "es"},
    {"q": "x" * 5001, "source": "en", "target": "es"},
    {"q": "hello", "source": "en", "target": "xx"},
])
def test_translate_invalid_request(client, body):
    response = client.post("/api/v1/translate", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


def test_translate_missing_text(client):
    response = client.post("/api/v1/translate", json={"source": "en", "target": "es"})
    assert response.status_code == 422
