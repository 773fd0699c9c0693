"""JSON-lines bridge between a UI process and the command registry.

Protocol (one JSON object per line):
- request:  `{"id": <any>, "command": "<name>", "args": {...}}`
- response: `{"id": <same>, "ok": ..., "value"|"error": ...}`

Requests are served concurrently, so responses may come back out of order;
the UI matches them by `id`. EOF ends the loop once in-flight requests are
answered.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable

from core.domain.results import GatewayError, GatewayResult
from core.services.commands import CommandRegistry, envelope

logger = logging.getLogger(__name__)

ReadLine = Callable[[], Awaitable[str]]
WriteLine = Callable[[str], None]


async def _stdin_readline() -> str:
    return await asyncio.to_thread(sys.stdin.readline)


def _stdout_writeline(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def _invalid(detail: str) -> dict[str, Any]:
    return envelope(GatewayResult.failure(GatewayError.invalid_request(detail)))


class StdioBridge:
    def __init__(
        self,
        registry: CommandRegistry,
        *,
        read_line: ReadLine | None = None,
        write_line: WriteLine | None = None,
    ) -> None:
        self._registry = registry
        self._read_line = read_line or _stdin_readline
        self._write_line = write_line or _stdout_writeline

    async def handle_line(self, line: str) -> dict[str, Any]:
        """Decode one request line and return its response object."""

        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            return {"id": None, **_invalid(f"malformed JSON: {exc}")}
        if not isinstance(request, dict):
            return {"id": None, **_invalid("request must be a JSON object")}

        request_id = request.get("id")
        command = request.get("command")
        args = request.get("args")
        if not isinstance(command, str) or not command:
            return {"id": request_id, **_invalid("missing 'command'")}
        if args is not None and not isinstance(args, dict):
            return {"id": request_id, **_invalid("'args' must be an object")}

        try:
            response = await self._registry.invoke(command, args)
        except Exception as exc:
            # Every request id gets exactly one response line.
            logger.exception("Command %s failed", command)
            detail = str(exc) or exc.__class__.__name__
            response = envelope(GatewayResult.failure(GatewayError.internal(detail)))
        return {"id": request_id, **response}

    async def _respond(self, line: str) -> None:
        response = await self.handle_line(line)
        self._write_line(json.dumps(response, ensure_ascii=False))

    async def serve(self) -> None:
        pending: set[asyncio.Task[None]] = set()
        logger.info("Bridge ready: %s", ", ".join(self._registry.names))
        while True:
            line = await self._read_line()
            if line == "":
                break
            if not line.strip():
                continue
            task = asyncio.create_task(self._respond(line))
            pending.add(task)
            task.add_done_callback(pending.discard)

        if pending:
            await asyncio.gather(*pending)
        logger.info("Bridge input closed")
