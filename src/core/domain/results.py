"""Result and error types returned by every gateway operation.

Operations never raise for network, HTTP or decoding problems: they return a
`GatewayResult` whose `error` tells the caller which of the three went wrong.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a caller can branch on."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    INVALID_REQUEST = "invalid_request"
    INTERNAL = "internal"


class GatewayError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str = Field(..., min_length=1, description="Human readable text for display.")
    status_code: int | None = Field(default=None, description="Only set for HTTP_STATUS.")
    detail: str | None = Field(default=None, description="Underlying diagnostic text.")

    def __str__(self) -> str:
        return self.message

    @classmethod
    def transport(cls, detail: str) -> "GatewayError":
        return cls(kind=ErrorKind.TRANSPORT, message=f"Request failed: {detail}", detail=detail)

    @classmethod
    def http_status(cls, status_code: int, reason: str = "", *, prefix: str = "HTTP error") -> "GatewayError":
        status = f"{status_code} {reason}".strip()
        return cls(kind=ErrorKind.HTTP_STATUS, message=f"{prefix}: {status}", status_code=status_code)

    @classmethod
    def decode(cls, detail: str) -> "GatewayError":
        return cls(kind=ErrorKind.DECODE, message=f"Failed to parse response: {detail}", detail=detail)

    @classmethod
    def invalid_request(cls, detail: str) -> "GatewayError":
        return cls(kind=ErrorKind.INVALID_REQUEST, message=f"Invalid request: {detail}", detail=detail)

    @classmethod
    def internal(cls, detail: str) -> "GatewayError":
        return cls(kind=ErrorKind.INTERNAL, message=f"Internal error: {detail}", detail=detail)

    def to_wire(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "statusCode": self.status_code,
            "detail": self.detail,
        }


class GatewayResult(BaseModel, Generic[T]):
    """Either a value (`ok=True`) or a `GatewayError` (`ok=False`)."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: T | None = None
    error: GatewayError | None = None

    @classmethod
    def success(cls, value: T) -> "GatewayResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: GatewayError) -> "GatewayResult[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value or raise `GatewayFailure` carrying the error."""

        if self.error is not None:
            raise GatewayFailure(self.error)
        return self.value  # type: ignore[return-value]


class GatewayFailure(Exception):
    """Raised by `GatewayResult.unwrap` for callers that prefer exceptions."""

    def __init__(self, error: GatewayError) -> None:
        self.error = error
        super().__init__(error.message)
