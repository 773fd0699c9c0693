"""TipChain gateway contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The command registry depends on this abstraction, so tests and alternative
  transports can stand in for the HTTP client.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Creator, Project, ProjectPage, TipRequest
from core.domain.results import GatewayResult


@runtime_checkable
class TipChainGateway(Protocol):
    """Minimal contract for the remote operations.

    Design rules:
    - Every method is async because it does exactly one HTTP round trip.
    - Every method returns a `GatewayResult`; none raises for I/O failures.
    """

    async def list_projects(self, page: int | None = None, limit: int | None = None) -> GatewayResult[ProjectPage]:
        ...

    async def get_project(self, uid: str) -> GatewayResult[Project]:
        ...

    async def get_creator(self, address: str) -> GatewayResult[Creator]:
        ...

    async def register_creator(
        self,
        basename: str,
        display_name: str,
        bio: str,
        avatar_url: str,
    ) -> GatewayResult[None]:
        ...

    async def send_tip(self, request: TipRequest) -> GatewayResult[str]:
        ...
