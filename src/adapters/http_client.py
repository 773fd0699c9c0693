"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and base URL for every gateway call.
- Eases testing: a `transport` can be injected (e.g. `httpx.MockTransport`).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the API base address.

    Why a builder:
    - Centralizes timeouts/headers so every operation behaves the same.
    - The timeout is always explicit, never the transport's implicit default.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class ClientProvider:
    """Hands out HTTP clients to gateway operations.

    Two modes, same observable behavior:
    - per call (default): a fresh client is built and closed around each request.
    - shared: one pooled client is built lazily and reused until `aclose()`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        shared: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._shared = self._settings.share_client if shared is None else shared
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @property
    def shared(self) -> bool:
        return self._shared

    def _build(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, transport=self._transport)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[httpx.AsyncClient]:
        if not self._shared:
            async with self._build() as client:
                yield client
            return

        if self._client is None or self._client.is_closed:
            async with self._lock:
                if self._client is None or self._client.is_closed:
                    logger.debug("Opening shared HTTP client for %s", self._settings.api_base_url)
                    self._client = self._build()
        yield self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "ClientProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
