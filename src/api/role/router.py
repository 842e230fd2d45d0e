"""Role domain router."""

from uuid import UUID

from fastapi import APIRouter

from src.api.core.dependencies import OrganizationServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.role.schemas import AssignRoleRequest, RoleChangeResponse

router = APIRouter(
    prefix="/roles",
    tags=["roles"],
)


@router.post(
    "/organizations/{organization_id}/users/{user_id}",
    response_model=RoleChangeResponse,
)
async def assign_role(
    organization_id: UUID,
    user_id: UUID,
    role_data: AssignRoleRequest,
    organization_service: OrganizationServiceDep,
) -> RoleChangeResponse:
    """Attach a role label to a user's membership."""
    assigned = await organization_service.assign_role(
        user_id=user_id, organization_id=organization_id, role_name=role_data.role
    )
    return APIResponse.success(
        message_code=MessageCode.ROLE_GRANTED,
        message=f"Role {role_data.role} assigned to user {user_id}",
        data=assigned,
    )


@router.delete(
    "/organizations/{organization_id}/users/{user_id}/{role_name}",
    response_model=RoleChangeResponse,
)
async def delete_role(
    organization_id: UUID,
    user_id: UUID,
    role_name: str,
    organization_service: OrganizationServiceDep,
) -> RoleChangeResponse:
    """Remove every label with this name from a user's membership."""
    removed = await organization_service.delete_role(
        user_id=user_id, organization_id=organization_id, role_name=role_name
    )
    return APIResponse.success(message_code=MessageCode.ROLE_REVOKED, data=removed)
