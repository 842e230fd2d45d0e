"""Organization services module."""

from .service import OrganizationService
from .invitation_manager import OrganizationInvitationService, PendingInvitation
from .projections import MemberUser, OrganizationMember

__all__ = [
    "OrganizationService",
    "OrganizationInvitationService",
    "PendingInvitation",
    "MemberUser",
    "OrganizationMember",
]
