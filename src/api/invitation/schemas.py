"""Invitation API schemas (combined models/requests)."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse


class InvitationCreateRequest(BaseModel):
    email: str
    name: str
    organization_id: UUID
    roles: list[str] = Field(default_factory=list)


class InvitationAcceptRequest(BaseModel):
    email: str
    organization_id: UUID
    code: str
    # Required when the invitation was issued to an email without an account
    password: str | None = None


InvitationCreateResponse = APIResponse[bool]
InvitationAcceptResponse = APIResponse[bool]
