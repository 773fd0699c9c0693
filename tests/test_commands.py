"""Tests for the command registry (front-end invoke surface)."""

from __future__ import annotations

import httpx
import pytest

from core.app_info import get_app_version
from core.services.commands import CommandRegistry

from conftest import CREATOR_JSON, PROJECT_JSON


@pytest.fixture()
def registry_for(make_client):
    def _make(responder):
        client, recorder = make_client(responder)
        return CommandRegistry(client), recorder

    return _make


def _never_called(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")


async def test_greet_makes_no_request(registry_for):
    registry, recorder = registry_for(_never_called)

    response = await registry.invoke("greet", {"name": "Ada"})

    assert response == {"ok": True, "value": "Hello, Ada! Welcome to Angel Requests!"}
    assert recorder.requests == []


async def test_version_makes_no_request(registry_for):
    registry, recorder = registry_for(_never_called)

    response = await registry.invoke("get_app_version")

    assert response["ok"] is True
    assert response["value"] == get_app_version()
    assert response["value"]
    assert recorder.requests == []


async def test_get_projects_uses_defaults(registry_for):
    body = {"data": [PROJECT_JSON], "pageInfo": {"totalItems": 1, "page": 1, "pageLimit": 20}}
    registry, recorder = registry_for(lambda r: httpx.Response(200, json=body))

    response = await registry.invoke("get_projects", {})

    assert recorder.last.url.query == b"page=1&limit=20"
    assert response["ok"] is True
    assert response["value"]["pageInfo"] == {"totalItems": 1, "page": 1, "pageLimit": 20}
    assert response["value"]["data"][0]["uid"] == "0xproj1"


async def test_get_creator_value_uses_wire_names(registry_for):
    registry, _ = registry_for(lambda r: httpx.Response(200, json=CREATOR_JSON))

    response = await registry.invoke("get_creator", {"address": "alice.base.eth"})

    assert response == {"ok": True, "value": CREATOR_JSON}


async def test_register_creator_accepts_camel_case_args(registry_for):
    registry, recorder = registry_for(lambda r: httpx.Response(204))

    response = await registry.invoke(
        "register_creator",
        {"basename": "bob", "displayName": "Bob", "bio": "", "avatarUrl": ""},
    )

    assert response == {"ok": True, "value": None}
    assert recorder.last_json()["displayName"] == "Bob"


async def test_send_tip(registry_for):
    registry, recorder = registry_for(lambda r: httpx.Response(200, json={"txHash": "0x1"}))

    response = await registry.invoke(
        "send_tip",
        {"tipRequest": {"to": "0xabc", "amount": "0.5", "message": "gm"}},
    )

    assert response == {"ok": True, "value": "Tip sent successfully!"}
    assert recorder.last_json()["token"] == "ETH"


async def test_http_error_envelope(registry_for):
    registry, _ = registry_for(lambda r: httpx.Response(404))

    response = await registry.invoke("get_creator", {"address": "nobody"})

    assert response == {
        "ok": False,
        "error": {
            "kind": "http_status",
            "message": "HTTP error: 404 Not Found",
            "statusCode": 404,
            "detail": None,
        },
    }


async def test_unknown_command(registry_for):
    registry, _ = registry_for(_never_called)

    response = await registry.invoke("delete_everything", {})

    assert response["ok"] is False
    assert response["error"]["kind"] == "invalid_request"
    assert "delete_everything" in response["error"]["message"]


async def test_missing_argument(registry_for):
    registry, recorder = registry_for(_never_called)

    response = await registry.invoke("get_creator", {})

    assert response["error"]["kind"] == "invalid_request"
    assert recorder.requests == []


def test_registered_names(make_client):
    client, _ = make_client(_never_called)

    assert CommandRegistry(client).names == [
        "get_app_version",
        "get_creator",
        "get_project",
        "get_projects",
        "greet",
        "register_creator",
        "send_tip",
    ]


def test_duplicate_registration_is_rejected(make_client):
    client, _ = make_client(_never_called)
    registry = CommandRegistry(client)

    with pytest.raises(ValueError):
        registry.register("greet", object, None)  # type: ignore[arg-type]
