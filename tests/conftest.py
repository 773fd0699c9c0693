"""Shared fixtures: settings isolated from .env files and a recording mock transport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import ClientProvider
from adapters.tipchain_api import TipChainClient
from core.config import AppSettings

BASE_URL = "https://api.tipchain.test"

PROJECT_JSON: dict[str, Any] = {
    "uid": "0xproj1",
    "title": "Open Water",
    "description": "Clean water for rural schools.",
    "recipient": "0xabc0000000000000000000000000000000000001",
    "slug": "open-water",
    "createdAt": "2024-05-01T10:00:00Z",
    "updatedAt": "2024-06-01T10:00:00Z",
}

CREATOR_JSON: dict[str, Any] = {
    "basename": "alice.base.eth",
    "displayName": "Alice",
    "bio": "Builds public goods.",
    "avatarUrl": "https://img.example/alice.png",
    "totalTipsReceived": "1.000000000000000001",
    "tipCount": 7,
    "isActive": True,
    "createdAt": 1714557600,
}


@dataclass
class Recorder:
    """Collects every request seen by the mock transport."""

    responder: Callable[[httpx.Request], httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    for key in ("API_BASE_URL", "HTTP_TIMEOUT_SECONDS", "SHARE_CLIENT", "DEFAULT_PAGE_LIMIT", "DEFAULT_TIP_TOKEN"):
        monkeypatch.delenv(f"ANGEL_REQUESTS_{key}", raising=False)
    return AppSettings(_env_file=None, api_base_url=BASE_URL, http_timeout_seconds=5.0)


@pytest.fixture()
def make_client(settings: AppSettings) -> Callable[..., tuple[TipChainClient, Recorder]]:
    def _make(
        responder: Callable[[httpx.Request], httpx.Response],
        *,
        shared: bool = False,
    ) -> tuple[TipChainClient, Recorder]:
        recorder = Recorder(responder)
        provider = ClientProvider(settings, shared=shared, transport=httpx.MockTransport(recorder))
        return TipChainClient(settings, provider=provider), recorder

    return _make
