"""Organization domain router."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.core.dependencies import OrganizationServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.organization.schemas import (
    AddUserRequest,
    AddUserResponse,
    LeaveOrganizationRequest,
    LeaveOrganizationResponse,
    MembershipModel,
    OrganizationCreateRequest,
    OrganizationCreateResponse,
    OrganizationDeleteResponse,
    OrganizationMemberModel,
    OrganizationModel,
    OrganizationUsersResponse,
)

router = APIRouter(
    prefix="/organizations",
    tags=["organizations"],
)


@router.post(
    "",
    response_model=OrganizationCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    organization_data: OrganizationCreateRequest,
    organization_service: OrganizationServiceDep,
) -> OrganizationCreateResponse:
    """Create an organization with the given user as its admin."""
    organization = await organization_service.create_organization(
        admin_id=organization_data.admin_id, name=organization_data.name
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_CREATED,
        data=OrganizationModel.model_validate(organization),
    )


@router.delete("/{organization_id}", response_model=OrganizationDeleteResponse)
async def delete_organization(
    organization_id: UUID,
    organization_service: OrganizationServiceDep,
) -> OrganizationDeleteResponse:
    """Delete an organization with all of its memberships."""
    deleted = await organization_service.delete_organization(organization_id)
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_DELETED, data=deleted
    )


@router.get("/{organization_id}/users", response_model=OrganizationUsersResponse)
async def list_organization_users(
    organization_id: UUID,
    organization_service: OrganizationServiceDep,
) -> OrganizationUsersResponse:
    """List members of an organization with their role labels."""
    members = await organization_service.fetch_organization_users(organization_id)
    return APIResponse.success(
        message_code=MessageCode.SUCCESS,
        data=[OrganizationMemberModel.model_validate(member) for member in members],
    )


@router.post(
    "/{organization_id}/users",
    response_model=AddUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_user(
    organization_id: UUID,
    user_data: AddUserRequest,
    organization_service: OrganizationServiceDep,
) -> AddUserResponse:
    """Create a new user directly inside an organization."""
    membership = await organization_service.add_user(
        email=user_data.email,
        name=user_data.name,
        password=user_data.password,
        organization_id=organization_id,
        roles=user_data.roles,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_ADDED,
        data=MembershipModel.model_validate(membership),
    )


@router.post("/{organization_id}/leave", response_model=LeaveOrganizationResponse)
async def leave_organization(
    organization_id: UUID,
    leave_data: LeaveOrganizationRequest,
    organization_service: OrganizationServiceDep,
) -> LeaveOrganizationResponse:
    """Remove a user's own membership from an organization."""
    left = await organization_service.leave_organization(
        user_id=leave_data.user_id, organization_id=organization_id
    )
    return APIResponse.success(message_code=MessageCode.ORGANIZATION_LEFT, data=left)
