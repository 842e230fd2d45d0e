"""Read-side projections returned by the organization service."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MemberUser:
    """Public view of a user: contact and profile data, no credentials."""

    email: str
    profile_data: dict


@dataclass(frozen=True)
class OrganizationMember:
    id: UUID
    user_id: UUID
    organization_id: UUID
    is_admin: bool
    created_at: datetime
    user: MemberUser
    roles: list[str] = field(default_factory=list)
