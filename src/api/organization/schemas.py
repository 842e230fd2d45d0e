"""Organization API schemas (combined models/requests)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.api.core.messages import APIResponse


class OrganizationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    identifier: str
    created_at: datetime


class MembershipModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    organization_id: UUID
    is_admin: bool
    created_at: datetime


class MemberUserModel(BaseModel):
    """User projection exposed in member listings (no credentials)."""

    model_config = ConfigDict(from_attributes=True)

    email: str
    profile_data: dict


class OrganizationMemberModel(MembershipModel):
    user: MemberUserModel
    roles: list[str]


class OrganizationCreateRequest(BaseModel):
    admin_id: UUID
    name: str = Field(..., min_length=1, max_length=100)


class AddUserRequest(BaseModel):
    # Formats are deliberately not checked here
    email: str
    name: str
    password: str
    roles: list[str] = Field(default_factory=list)


class LeaveOrganizationRequest(BaseModel):
    user_id: UUID


OrganizationCreateResponse = APIResponse[OrganizationModel]
OrganizationDeleteResponse = APIResponse[bool]
AddUserResponse = APIResponse[MembershipModel]
OrganizationUsersResponse = APIResponse[list[OrganizationMemberModel]]
LeaveOrganizationResponse = APIResponse[bool]
