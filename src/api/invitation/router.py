"""Invitation domain router."""

from fastapi import APIRouter

from src.api.core.dependencies import OrganizationInvitationServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.invitation.schemas import (
    InvitationAcceptRequest,
    InvitationAcceptResponse,
    InvitationCreateRequest,
    InvitationCreateResponse,
)

router = APIRouter(
    prefix="/invitations",
    tags=["invitations"],
)


@router.post("", response_model=InvitationCreateResponse)
async def create_invitation(
    invitation_data: InvitationCreateRequest,
    invitation_service: OrganizationInvitationServiceDep,
) -> InvitationCreateResponse:
    """Email an invitation code to join an organization."""
    sent = await invitation_service.invite_user(
        email=invitation_data.email,
        name=invitation_data.name,
        organization_id=invitation_data.organization_id,
        roles=invitation_data.roles,
    )
    return APIResponse.success(message_code=MessageCode.INVITE_SENT, data=sent)


@router.post("/accept", response_model=InvitationAcceptResponse)
async def accept_invitation(
    invitation_data: InvitationAcceptRequest,
    invitation_service: OrganizationInvitationServiceDep,
) -> InvitationAcceptResponse:
    """Redeem an invitation code and join the organization."""
    accepted = await invitation_service.accept_invitation(
        email=invitation_data.email,
        organization_id=invitation_data.organization_id,
        code=invitation_data.code,
        password=invitation_data.password,
    )
    return APIResponse.success(message_code=MessageCode.INVITE_ACCEPTED, data=accepted)
