"""Tests for the domain models and result types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import Creator, Project, ProjectPage, TipRequest
from core.domain.results import ErrorKind, GatewayError, GatewayResult

from conftest import CREATOR_JSON, PROJECT_JSON


def test_project_accepts_wire_and_python_names():
    from_wire = Project.model_validate(PROJECT_JSON)
    from_python = Project(
        uid="0xproj1",
        title="Open Water",
        description="Clean water for rural schools.",
        recipient="0xabc0000000000000000000000000000000000001",
        slug="open-water",
        created_at="2024-05-01T10:00:00Z",
        updated_at="2024-06-01T10:00:00Z",
    )
    assert from_wire == from_python


def test_project_keeps_optional_grant_fields():
    project = Project.model_validate({**PROJECT_JSON, "noOfGrants": 3, "symlinks": ["ow"], "pointers": [{}]})

    assert project.no_of_grants == 3
    assert project.symlinks == ["ow"]
    assert "pointers" not in project.to_wire()


def test_page_requires_page_info():
    with pytest.raises(ValidationError):
        ProjectPage.model_validate({"data": []})


def test_creator_is_frozen():
    creator = Creator.model_validate(CREATOR_JSON)

    with pytest.raises(ValidationError):
        creator.bio = "changed"  # type: ignore[misc]


def test_creator_rejects_numeric_amount():
    with pytest.raises(ValidationError):
        Creator.model_validate({**CREATOR_JSON, "totalTipsReceived": 1.5})


def test_tip_payload_token_default():
    assert TipRequest(to="0x1", amount="2", message="m").payload()["token"] == "ETH"
    assert TipRequest(to="0x1", amount="2", message="m").payload(default_token="USDC")["token"] == "USDC"
    assert TipRequest(to="0x1", amount="2", message="m", token="BTC").payload()["token"] == "BTC"


def test_error_constructors():
    transport = GatewayError.transport("dns failure")
    status = GatewayError.http_status(502, "Bad Gateway")
    decode = GatewayError.decode("expected value")

    assert (transport.kind, str(transport)) == (ErrorKind.TRANSPORT, "Request failed: dns failure")
    assert (status.kind, status.message, status.status_code) == (ErrorKind.HTTP_STATUS, "HTTP error: 502 Bad Gateway", 502)
    assert (decode.kind, decode.detail) == (ErrorKind.DECODE, "expected value")


def test_result_success_and_failure():
    good = GatewayResult.success("x")
    bad = GatewayResult.failure(GatewayError.transport("boom"))

    assert good.ok and good.unwrap() == "x" and good.error is None
    assert not bad.ok and bad.value is None
