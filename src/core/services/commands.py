"""Named commands exposed to the front end.

The UI process invokes commands by name with a JSON object of arguments and
gets back a JSON-safe envelope:

- `{"ok": true, "value": ...}`
- `{"ok": false, "error": {"kind", "message", "statusCode", "detail"}}`

Unknown names and malformed arguments come back as `invalid_request`
envelopes; `invoke` never raises for caller mistakes or I/O failures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, Field, ValidationError

from core.app_info import get_app_version, greet
from core.domain.models import TipRequest, WireModel
from core.domain.results import GatewayError, GatewayResult
from core.interfaces.gateway import TipChainGateway

logger = logging.getLogger(__name__)


class GreetArgs(WireModel):
    name: str


class NoArgs(WireModel):
    pass


class ProjectsArgs(WireModel):
    page: int | None = None
    limit: int | None = None


class ProjectArgs(WireModel):
    uid: str = Field(..., min_length=1)


class CreatorArgs(WireModel):
    address: str = Field(..., min_length=1)


class RegisterCreatorArgs(WireModel):
    basename: str
    display_name: str
    bio: str
    avatar_url: str


class SendTipArgs(WireModel):
    tip_request: TipRequest


Handler = Callable[[Any], Awaitable[GatewayResult[Any]]]


@dataclass(frozen=True)
class Command:
    name: str
    args_model: type[BaseModel]
    handler: Handler


def _to_wire_value(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_wire()
    return value


def envelope(result: GatewayResult[Any]) -> dict[str, Any]:
    if result.error is None:
        return {"ok": True, "value": _to_wire_value(result.value)}
    return {"ok": False, "error": result.error.to_wire()}


class CommandRegistry:
    """Maps command names to gateway operations."""

    def __init__(self, gateway: TipChainGateway) -> None:
        self._gateway = gateway
        self._commands: dict[str, Command] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        gateway = self._gateway

        async def _greet(args: GreetArgs) -> GatewayResult[str]:
            return GatewayResult.success(greet(args.name))

        async def _version(_: NoArgs) -> GatewayResult[str]:
            return GatewayResult.success(get_app_version())

        async def _projects(args: ProjectsArgs) -> GatewayResult[Any]:
            return await gateway.list_projects(page=args.page, limit=args.limit)

        async def _project(args: ProjectArgs) -> GatewayResult[Any]:
            return await gateway.get_project(args.uid)

        async def _creator(args: CreatorArgs) -> GatewayResult[Any]:
            return await gateway.get_creator(args.address)

        async def _register(args: RegisterCreatorArgs) -> GatewayResult[Any]:
            return await gateway.register_creator(
                args.basename,
                args.display_name,
                args.bio,
                args.avatar_url,
            )

        async def _tip(args: SendTipArgs) -> GatewayResult[Any]:
            return await gateway.send_tip(args.tip_request)

        self.register("greet", GreetArgs, _greet)
        self.register("get_app_version", NoArgs, _version)
        self.register("get_projects", ProjectsArgs, _projects)
        self.register("get_project", ProjectArgs, _project)
        self.register("get_creator", CreatorArgs, _creator)
        self.register("register_creator", RegisterCreatorArgs, _register)
        self.register("send_tip", SendTipArgs, _tip)

    def register(self, name: str, args_model: type[BaseModel], handler: Handler) -> None:
        if name in self._commands:
            raise ValueError(f"command already registered: {name}")
        self._commands[name] = Command(name=name, args_model=args_model, handler=handler)

    @property
    def names(self) -> list[str]:
        return sorted(self._commands)

    async def invoke(self, name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
        command = self._commands.get(name)
        if command is None:
            return envelope(GatewayResult.failure(GatewayError.invalid_request(f"unknown command '{name}'")))

        try:
            parsed = command.args_model.model_validate(args or {})
        except ValidationError as exc:
            logger.info("Rejected arguments for %s: %s", name, exc)
            return envelope(GatewayResult.failure(GatewayError.invalid_request(str(exc))))

        logger.debug("Invoking %s", name)
        return envelope(await command.handler(parsed))
