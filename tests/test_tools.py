"""Tests for the Ollama stub and the command-line client."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import requests
from fastapi.testclient import TestClient

import translate_client
from darija_translator.app import main as app_main
from darija_translator.app.services import build_chat_payload
from demo_agents import ollama_stub


@pytest.fixture
def stub_client() -> TestClient:
    with TestClient(ollama_stub.app) as test_client:
        yield test_client


def test_stub_answers_like_ollama(stub_client: TestClient) -> None:
    """The stub should reply with an Ollama-shaped assistant message."""
    payload = build_chat_payload("Good night", "latin", "deepseek-v3.1:671b-cloud", 0.2)

    response = stub_client.post("/api/chat", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["done"] is True
    assert body["model"] == "deepseek-v3.1:671b-cloud"
    assert body["message"] == {"role": "assistant", "content": "[darija-latin] Good night"}


def test_stub_rejects_empty_messages(stub_client: TestClient) -> None:
    """The stub should refuse a chat request without messages."""
    response = stub_client.post("/api/chat", json={"model": "m", "messages": []})
    assert response.status_code == 422


def test_translator_through_stub(stub_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """The translator should accept the stub's replies as a real chat API reply."""

    async def fake_post(self, url: str, json: dict[str, Any]):  # noqa: ANN001
        return stub_client.post(httpx.URL(url).path, json=json)

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)

    with TestClient(app_main.app) as client:
        response = client.post("/translate", json={"text": "Where is the station?"})

    assert response.status_code == 200
    assert response.json() == {"translation": "[darija-arabic] Where is the station?"}


def test_client_posts_text_and_returns_translation(monkeypatch: pytest.MonkeyPatch) -> None:
    """The CLI client should post text, script and temperature and return the translation."""
    calls: list[dict[str, Any]] = []

    def fake_post(url: str, json: dict[str, Any], timeout: float):
        calls.append({"url": url, "json": json})
        response = requests.Response()
        response.status_code = 200
        response._content = '{"translation": "labas"}'.encode("utf-8")
        return response

    monkeypatch.setattr(requests, "post", fake_post)

    result = translate_client.translate("How are you?", script="latin", temperature=0.4)

    assert result == "labas"
    assert calls[0]["url"].endswith("/translate")
    assert calls[0]["json"] == {"text": "How are you?", "script": "latin", "temperature": 0.4}


def test_client_raises_on_error_status(monkeypatch: pytest.MonkeyPatch) -> None:
    """The CLI client should raise on error statuses."""

    def fake_post(url: str, json: dict[str, Any], timeout: float):
        response = requests.Response()
        response.status_code = 400
        response._content = b'{"error": "Le champ \'text\' est obligatoire."}'
        return response

    monkeypatch.setattr(requests, "post", fake_post)

    with pytest.raises(requests.HTTPError):
        translate_client.translate("   ")


def test_client_main_prints_translation(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """The CLI entry point should print the translation."""
    monkeypatch.setattr(translate_client, "translate", lambda text, script, temperature: f"{script}:{text}")

    translate_client.main(["Hello", "--script", "latin"])

    assert capsys.readouterr().out.strip() == "latin:Hello"
