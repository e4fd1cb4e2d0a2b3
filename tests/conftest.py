"""Shared fixtures: a fake Deepgram endpoint and an app client wired to it."""
from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from voice_relay.config import get_settings
from voice_relay.main import app
from voice_relay.transcription.service import TranscriptionRelay, get_transcription_relay

DEEPGRAM_URL = "https://api.deepgram.com/v1/listen"
QUERY_PARAMS = {"model": "nova-2", "smart_format": "true", "punctuate": "true"}
API_KEY = "dg-secret-key"


def deepgram_body(transcript: str) -> dict:
    return {"results": {"channels": [{"alternatives": [{"transcript": transcript}]}]}}


class FakeDeepgram:
    """Records outbound requests and answers them with a canned handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=deepgram_body("hello world"))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the real environment out of settings."""
    monkeypatch.delenv("DEEPGRAM_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_deepgram() -> FakeDeepgram:
    return FakeDeepgram()


@pytest.fixture
def make_relay(fake_deepgram):
    def _make(api_key: Optional[str] = API_KEY) -> TranscriptionRelay:
        return TranscriptionRelay(
            api_key=api_key,
            api_url=DEEPGRAM_URL,
            query_params=QUERY_PARAMS,
            transport=fake_deepgram.transport(),
        )

    return _make


@pytest.fixture
def make_client(make_relay):
    def _make(api_key: Optional[str] = API_KEY) -> TestClient:
        app.dependency_overrides[get_transcription_relay] = lambda: make_relay(api_key)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
