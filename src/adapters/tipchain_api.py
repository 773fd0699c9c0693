"""TipChain API gateway.

Each public method is one gateway operation: it issues exactly one HTTP
request and turns the outcome into a `GatewayResult`. Transport errors,
non-2xx statuses and undecodable bodies all land in the error branch; no
retries, no caching.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import ClientProvider
from core.config import AppSettings
from core.domain.models import (
    Creator,
    CreatorRegistration,
    Project,
    ProjectPage,
    TipRequest,
)
from core.domain.results import GatewayError, GatewayResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

TIP_SENT_MESSAGE = "Tip sent successfully!"


def path_segment(value: str) -> str:
    """Escape `value` as a single URL path segment (`/` included)."""

    return quote(value, safe="")


class TipChainClient:
    """Async client implementing `core.interfaces.gateway.TipChainGateway`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        provider: ClientProvider | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._provider = provider or ClientProvider(self._settings)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def aclose(self) -> None:
        await self._provider.aclose()

    async def __aenter__(self) -> "TipChainClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response | GatewayError:
        logger.debug("%s %s params=%s", method, path, params)
        try:
            async with self._provider.acquire() as client:
                response = await client.request(method, path, params=params, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            detail = str(exc) or exc.__class__.__name__
            logger.warning("%s %s failed: %s", method, path, detail)
            return GatewayError.transport(detail)
        return response

    def _check_status(self, response: httpx.Response, *, prefix: str = "HTTP error") -> GatewayError | None:
        if response.is_success:
            return None
        logger.warning(
            "%s %s returned HTTP %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        return GatewayError.http_status(response.status_code, response.reason_phrase, prefix=prefix)

    def _decode(self, response: httpx.Response, model: type[M]) -> GatewayResult[M]:
        try:
            return GatewayResult.success(model.model_validate(response.json()))
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError.
            logger.warning("Undecodable %s body from %s: %s", model.__name__, response.request.url.path, exc)
            return GatewayResult.failure(GatewayError.decode(str(exc)))

    async def _get_model(self, path: str, model: type[M], *, params: dict[str, Any] | None = None) -> GatewayResult[M]:
        outcome = await self._send("GET", path, params=params)
        if isinstance(outcome, GatewayError):
            return GatewayResult.failure(outcome)
        error = self._check_status(outcome)
        if error is not None:
            return GatewayResult.failure(error)
        return self._decode(outcome, model)

    async def list_projects(self, page: int | None = None, limit: int | None = None) -> GatewayResult[ProjectPage]:
        """`GET /projects?page=&limit=`; values are forwarded without range checks."""

        params = {
            "page": 1 if page is None else page,
            "limit": self._settings.default_page_limit if limit is None else limit,
        }
        return await self._get_model("/projects", ProjectPage, params=params)

    async def get_project(self, uid: str) -> GatewayResult[Project]:
        return await self._get_model(f"/projects/{path_segment(uid)}", Project)

    async def get_creator(self, address: str) -> GatewayResult[Creator]:
        return await self._get_model(f"/creators/{path_segment(address)}", Creator)

    async def register_creator(
        self,
        basename: str,
        display_name: str,
        bio: str,
        avatar_url: str,
    ) -> GatewayResult[None]:
        """`POST /creators/register`. Any 2xx counts as registered; the body is ignored."""

        registration = CreatorRegistration(
            basename=basename,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
        )
        outcome = await self._send("POST", "/creators/register", json=registration.to_wire())
        if isinstance(outcome, GatewayError):
            return GatewayResult.failure(outcome)
        error = self._check_status(outcome, prefix="Registration failed")
        if error is not None:
            return GatewayResult.failure(error)
        return GatewayResult.success(None)

    async def send_tip(self, request: TipRequest) -> GatewayResult[str]:
        """`POST /tips/send`. Any 2xx yields the fixed confirmation text."""

        payload = request.payload(default_token=self._settings.default_tip_token)
        outcome = await self._send("POST", "/tips/send", json=payload)
        if isinstance(outcome, GatewayError):
            return GatewayResult.failure(outcome)
        error = self._check_status(outcome, prefix="Tip failed")
        if error is not None:
            return GatewayResult.failure(error)
        if outcome.content:
            logger.debug("Tip response body (not surfaced): %s", outcome.text[:500])
        return GatewayResult.success(TIP_SENT_MESSAGE)
