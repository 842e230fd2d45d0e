"""Role label API schemas."""

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse


class AssignRoleRequest(BaseModel):
    role: str = Field(..., min_length=1)


RoleChangeResponse = APIResponse[bool]
