"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the network boundary and self-documenting fields.
- One place that owns the wire naming (camelCase) while Python code keeps
  snake_case attributes.

Note:
- These models describe *what* the TipChain API returns, not *how* it is fetched.
- Amounts stay decimal strings end-to-end; nothing here parses them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

DEFAULT_TIP_TOKEN = "ETH"


class WireModel(BaseModel):
    """Base for records exchanged with the API: camelCase on the wire, frozen locally."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Project(WireModel):
    """A TipChain project (read view of server state)."""

    uid: str = Field(..., description="Unique project identifier.")
    title: str = Field(..., description="Project title.")
    description: str = Field(..., description="Free-form project description.")
    recipient: str = Field(..., description="Identifier (address) that receives tips.")
    slug: str = Field(..., description="URL slug.")
    created_at: str = Field(..., description="Creation timestamp as sent by the server.")
    updated_at: str = Field(..., description="Last update timestamp as sent by the server.")

    details_last_updated_at: str | None = Field(default=None)
    grant_last_updated_at: str | None = Field(default=None)
    no_of_grants: int | None = Field(default=None)
    no_of_grant_milestones: int | None = Field(default=None)
    no_of_project_milestones: int | None = Field(default=None)
    symlinks: list[str] | None = Field(default=None)


class PageInfo(WireModel):
    """Position of a page within the full project collection."""

    total_items: int = Field(..., ge=0)
    page: int
    page_limit: int


class ProjectPage(WireModel):
    """One page of the project listing."""

    data: list[Project] = Field(default_factory=list)
    page_info: PageInfo


class Creator(WireModel):
    """Creator profile as stored by the API."""

    basename: str = Field(..., description="Unique external identifier (e.g. a Base name).")
    display_name: str
    bio: str
    avatar_url: str
    total_tips_received: str = Field(
        ...,
        description="Decimal amount kept as text to avoid float precision loss.",
    )
    tip_count: int = Field(..., ge=0)
    is_active: bool
    created_at: int = Field(..., description="Epoch timestamp.")


class CreatorRegistration(WireModel):
    """Registration payload for `POST /creators/register`."""

    basename: str
    display_name: str
    bio: str
    avatar_url: str


class TipRequest(WireModel):
    """Transient input of a single tip; never persisted."""

    to: str = Field(..., description="Recipient identifier.")
    amount: str = Field(..., description="Decimal amount as text.")
    message: str = Field(default="")
    token: str | None = Field(default=None, description="Token symbol; ETH when absent.")

    def payload(self, default_token: str = DEFAULT_TIP_TOKEN) -> dict[str, str]:
        """Body for `POST /tips/send`, with the token always filled in."""

        return {
            "to": self.to,
            "amount": self.amount,
            "message": self.message,
            "token": self.token if self.token is not None else default_token,
        }
