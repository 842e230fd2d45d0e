"""Organization membership service with dependency injection."""

import secrets
from uuid import UUID

from fastapi import status
from sqlalchemy import delete, func, select
from sqlalchemy.orm import selectinload

from src.api.core.exceptions.base import MembershipException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Organization, OrganizationUser, Role, User
from src.services.organization.projections import MemberUser, OrganizationMember
from src.utils.hashing import HashingService

# Random bytes appended (hex encoded) to an organization name to build its identifier
IDENTIFIER_SUFFIX_BYTES = 6


def build_identifier(name: str) -> str:
    """Human readable identifier, unique by randomness rather than by lookup."""
    return f"{name}-{secrets.token_hex(IDENTIFIER_SUFFIX_BYTES)}"


class OrganizationService(BaseService):
    """Service for organization and membership management.

    Every public method is an independent unit of work: it either commits
    once or rolls back and re-raises the store error unchanged.
    """

    async def add_user(
        self,
        email: str,
        name: str,
        password: str,
        organization_id: UUID,
        roles: list[str],
    ) -> OrganizationUser:
        """Create a user and a non-admin membership with role labels.

        Input is not validated here. An unknown organization or an email
        that is already taken fails at the store.
        """
        user = User(
            email=email,
            auth_data={"password": HashingService.hash_password(password)},
            profile_data={"firstname": name},
        )
        membership = OrganizationUser(
            user=user,
            organization_id=organization_id,
            is_admin=False,
            roles=[Role(name=role) for role in roles],
        )
        self.db.add(membership)
        await self._commit()

        self.logger.info(
            f"Added user {user.id} to organization {organization_id}",
            roles=roles,
        )
        return membership

    async def fetch_organization_users(
        self, organization_id: UUID
    ) -> list[OrganizationMember]:
        """List every membership of an organization with its user's public data."""
        stmt = (
            select(OrganizationUser, User.email, User.profile_data)
            .join(User, OrganizationUser.user_id == User.id)
            .where(OrganizationUser.organization_id == organization_id)
            .options(selectinload(OrganizationUser.roles))
            .order_by(OrganizationUser.created_at)
        )
        result = await self.db.execute(stmt)

        return [
            OrganizationMember(
                id=membership.id,
                user_id=membership.user_id,
                organization_id=membership.organization_id,
                is_admin=membership.is_admin,
                created_at=membership.created_at,
                user=MemberUser(email=email, profile_data=profile_data or {}),
                roles=[role.name for role in membership.roles],
            )
            for membership, email, profile_data in result.all()
        ]

    async def create_organization(self, admin_id: UUID, name: str) -> Organization:
        """Create an organization with the given user as its only admin."""
        organization = Organization(name=name, identifier=build_identifier(name))
        membership = OrganizationUser(
            user_id=admin_id, organization=organization, is_admin=True
        )
        self.db.add(membership)
        await self._commit()

        self.logger.info(
            f"Created organization {organization.id} with admin {admin_id}",
            identifier=organization.identifier,
        )
        return organization

    async def assign_role(
        self, user_id: UUID, organization_id: UUID, role_name: str
    ) -> bool:
        """Attach one more role label to a membership; duplicates are kept."""
        membership = await self._get_membership(user_id, organization_id)
        if not membership:
            raise MembershipException(
                MessageCode.USER_NOT_IN_ORGANIZATION, status.HTTP_404_NOT_FOUND
            )

        self.db.add(Role(name=role_name, organization_user_id=membership.id))
        await self._commit()

        self.logger.info(
            f"Assigned role {role_name} to user {user_id} in {organization_id}"
        )
        return True

    async def delete_role(
        self, user_id: UUID, organization_id: UUID, role_name: str
    ) -> bool:
        """Remove every role label with this name from a membership."""
        membership = await self._get_membership(user_id, organization_id)
        if not membership:
            raise MembershipException(
                MessageCode.USER_NOT_IN_ORGANIZATION, status.HTTP_404_NOT_FOUND
            )

        result = await self.db.execute(
            delete(Role).where(
                Role.organization_user_id == membership.id,
                Role.name == role_name,
            )
        )
        await self._commit()

        self.logger.info(
            f"Removed role {role_name} from user {user_id} in {organization_id}",
            removed=result.rowcount,
        )
        return True

    async def leave_organization(self, user_id: UUID, organization_id: UUID) -> bool:
        """Delete a membership. The last admin of an organization cannot leave."""
        membership = await self._get_membership(user_id, organization_id)
        if not membership:
            raise MembershipException(
                MessageCode.NOT_ORGANIZATION_MEMBER, status.HTTP_404_NOT_FOUND
            )

        if membership.is_admin:
            admin_count = await self._count_admins(organization_id)
            if admin_count == 1:
                raise MembershipException(
                    MessageCode.ADMIN_CANNOT_LEAVE, status.HTTP_409_CONFLICT
                )

        await self.db.delete(membership)
        await self._commit()

        self.logger.info(f"User {user_id} left organization {organization_id}")
        return True

    async def delete_organization(self, organization_id: UUID) -> bool:
        """Delete an organization together with its memberships and role labels."""
        organization = await self.db.get(Organization, organization_id)
        if not organization:
            raise MembershipException(
                MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )

        await self.db.delete(organization)
        await self._commit()

        self.logger.info(f"Deleted organization {organization_id}")
        return True

    # Private helper methods

    async def _get_membership(
        self, user_id: UUID, organization_id: UUID
    ) -> OrganizationUser | None:
        stmt = select(OrganizationUser).where(
            OrganizationUser.user_id == user_id,
            OrganizationUser.organization_id == organization_id,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _count_admins(self, organization_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(OrganizationUser)
            .where(
                OrganizationUser.organization_id == organization_id,
                OrganizationUser.is_admin.is_(True),
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()
