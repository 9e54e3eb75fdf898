from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from adapters import http_client
from core.config import AppSettings
from core.services import gist_pipeline

GIST_JSON = {
    "id": "aa5a315d61ae9438b18d",
    "url": "https://api.github.com/gists/aa5a315d61ae9438b18d",
    "forks_url": "https://api.github.com/gists/aa5a315d61ae9438b18d/forks",
    "html_url": "https://gist.github.com/aa5a315d61ae9438b18d",
    "created_at": "2010-04-14T02:15:15Z",
    "public": False,
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """No real tokens, no stray .env file."""

    for name in ("GIST_TOKEN", "GITHUB_TOKEN", "GISTPOST_API_BASE_URL", "GISTPOST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def gist_json() -> dict:
    return dict(GIST_JSON)


@pytest.fixture
def mock_api(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[httpx.Request]]:
    """Route the pipeline's HTTP client to an in-memory handler.

    Returns a function taking (status, body) and giving back the list of
    captured requests.
    """

    def install(status: int = 201, body: bytes | dict = GIST_JSON) -> list[httpx.Request]:
        seen: list[httpx.Request] = []
        raw = json.dumps(body).encode() if isinstance(body, dict) else body

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status, content=raw)

        def fake_build_client(settings=None, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return http_client.build_client(settings, **kwargs)

        monkeypatch.setattr(gist_pipeline, "build_client", fake_build_client)
        return seen

    return install
