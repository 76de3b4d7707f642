"""Tenant request/response schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TenantResponse(BaseModel):
    """The tenant the request resolved to."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str | None = None
    slug: str
    urls: dict[str, str] = Field(default_factory=dict)


class SessionClearedResponse(BaseModel):
    cleared: bool
