import secrets
import string
from urllib.parse import urlencode
from uuid import UUID

import redis.asyncio as redis
from fastapi import status
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import MembershipException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import (
    Organization,
    OrganizationUser,
    Role,
    User,
    UserStatus,
)
from src.emails import render_invitation_email
from src.services.email import EmailService
from src.utils.hashing import HashingService
from src.utils.settings.invitation import InvitationSettings

INVITE_CODE_LENGTH = 6
INVITE_KEY_PREFIX = "invite"


class PendingInvitation(BaseModel):
    """Invitation payload kept in Redis until it is accepted or expires."""

    code: str
    name: str
    is_new_user: bool
    roles: list[str] = Field(default_factory=list)


def invitation_key(organization_id: UUID, email: str) -> str:
    return f"{INVITE_KEY_PREFIX}:{organization_id}-{email}"


def generate_invite_code(length: int = INVITE_CODE_LENGTH) -> str:
    """Numeric one-time code, digits only."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


class OrganizationInvitationService(BaseService):
    """Service for inviting users into organizations by emailed code.

    Pending invitations live in Redis under one key per organization and
    email, so inviting the same address again replaces the previous code and
    restarts its expiry. Acceptance claims the key atomically (GETDEL) so a
    code can only ever be redeemed once.
    """

    def __init__(
        self,
        db: AsyncSession,
        redis_client: redis.Redis,
        email_service: EmailService,
        settings: InvitationSettings,
    ):
        super().__init__(db)
        self.redis = redis_client
        self.email_service = email_service
        self.settings = settings

    async def invite_user(
        self,
        email: str,
        name: str,
        organization_id: UUID,
        roles: list[str],
    ) -> bool:
        """Email a join link with a one-time code and store the pending invitation.

        Returns once the email was handed to the transport and the invitation
        was stored; delivery is not verified.
        """
        user = await self._get_user_by_email(email)
        organization = await self._ensure_organization_exists(organization_id)

        if user:
            await self._ensure_user_not_member(user.id, organization_id)

        is_new_user = user is None
        code = generate_invite_code()

        email_data = render_invitation_email(
            organization_name=organization.name,
            invitee_name=name,
            join_url=self._build_join_url(
                email, organization_id, is_new_user, code, name
            ),
            sender_name=self.settings.ORG_NAME,
        )
        email_id = await self.email_service.send_email(
            to_address=email,
            subject=email_data["subject"],
            html=email_data["html"],
        )
        if not email_id:
            # The code only reaches the invitee by email; never store it unsent
            raise MembershipException(
                MessageCode.INVITATION_EMAIL_NOT_SENT,
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        key = invitation_key(organization_id, email)
        if await self.redis.exists(key):
            self.logger.info(
                f"Replacing pending invitation for {email} to organization {organization_id}"
            )

        invitation = PendingInvitation(
            code=code, name=name, is_new_user=is_new_user, roles=roles
        )
        await self.redis.set(
            key,
            invitation.model_dump_json(),
            ex=self.settings.INVITE_CODE_EXPIRY,
        )

        self.logger.info(
            f"Invited {email} to organization {organization_id}",
            is_new_user=is_new_user,
            roles=roles,
        )
        return True

    async def accept_invitation(
        self,
        email: str,
        organization_id: UUID,
        code: str,
        password: str | None = None,
    ) -> bool:
        """Redeem a pending invitation and create the membership.

        New users must supply a password; for existing users a supplied
        password is ignored. Verification failures leave the store untouched.
        If anything fails after the invitation was claimed it is put back, so
        the same code can be retried until it expires.
        """
        key = invitation_key(organization_id, email)
        raw_invitation = await self.redis.get(key)
        invitation = self._verify_invitation(raw_invitation, code)

        if invitation.is_new_user and not password:
            raise MembershipException(
                MessageCode.PASSWORD_REQUIRED, status.HTTP_400_BAD_REQUEST
            )

        user: User | None = None
        password_hash: str | None = None
        if invitation.is_new_user:
            # Hashing rejects some inputs (NUL bytes); fail before the claim
            password_hash = HashingService.hash_password(password)
        else:
            user = await self._get_user_by_email(email)
            if not user:
                raise MembershipException(
                    MessageCode.USER_NOT_FOUND, status.HTTP_404_NOT_FOUND
                )
            await self._ensure_user_not_member(user.id, organization_id)
            if password:
                self.logger.debug(
                    f"Ignoring password supplied for existing user {user.id}"
                )

        remaining_ttl = await self.redis.ttl(key)
        await self._claim_invitation(key, raw_invitation, remaining_ttl)

        try:
            if user is None:
                user = User(
                    email=email,
                    auth_data={"password": password_hash},
                    profile_data={
                        "firstname": invitation.name,
                        "lastname": "",
                        "status": UserStatus.VERIFIED.value,
                    },
                )
            membership = OrganizationUser(
                user=user,
                organization_id=organization_id,
                is_admin=False,
                roles=[Role(name=role) for role in invitation.roles],
            )
            self.db.add(membership)
            await self._commit()
        except BaseException:
            # Cancellation included: a claimed invitation is never dropped
            await self._restore_invitation(key, raw_invitation, remaining_ttl)
            await self.db.rollback()
            raise

        self.logger.info(
            f"User {user.id} accepted invitation to organization {organization_id}",
            is_new_user=invitation.is_new_user,
        )
        return True

    # Private helper methods

    def _build_join_url(
        self,
        email: str,
        organization_id: UUID,
        is_new_user: bool,
        code: str,
        name: str,
    ) -> str:
        query = urlencode(
            {
                "user": email,
                "org": str(organization_id),
                "newuser": "true" if is_new_user else "false",
                "code": code,
                "name": name,
            }
        )
        return f"{self.settings.REDIRECT_URL.rstrip('/')}/join?{query}"

    def _verify_invitation(
        self, raw_invitation: str | None, code: str
    ) -> PendingInvitation:
        """Parse the stored payload and check the code in constant time."""
        if not raw_invitation:
            raise MembershipException(
                MessageCode.INVITATION_VERIFICATION_FAILED,
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            invitation = PendingInvitation.model_validate_json(raw_invitation)
        except ValidationError:
            self.logger.warning("Discarding unreadable pending invitation payload")
            raise MembershipException(
                MessageCode.INVITATION_VERIFICATION_FAILED,
                status.HTTP_400_BAD_REQUEST,
            )

        if not invitation.code or not secrets.compare_digest(
            invitation.code.encode(), code.encode()
        ):
            raise MembershipException(
                MessageCode.INVITATION_VERIFICATION_FAILED,
                status.HTTP_400_BAD_REQUEST,
            )

        return invitation

    async def _claim_invitation(
        self, key: str, raw_invitation: str, remaining_ttl: int
    ) -> None:
        """Atomically take the invitation out of Redis.

        Only the request that removes exactly the payload it verified may
        continue; a concurrent acceptance or a re-invite in between makes
        this one fail verification.
        """
        claimed = await self.redis.getdel(key)
        if claimed == raw_invitation:
            return

        if claimed is not None:
            # Replaced by a newer invitation between GET and GETDEL; keep it.
            await self._restore_invitation(key, claimed, remaining_ttl)
        raise MembershipException(
            MessageCode.INVITATION_VERIFICATION_FAILED, status.HTTP_400_BAD_REQUEST
        )

    async def _restore_invitation(
        self, key: str, raw_invitation: str, remaining_ttl: int
    ) -> None:
        # TTL returns -2/-1 for missing/persistent keys; never restore without expiry
        ttl = remaining_ttl if remaining_ttl > 0 else self.settings.INVITE_CODE_EXPIRY
        await self.redis.set(key, raw_invitation, ex=ttl)
        self.logger.info(f"Restored pending invitation {key}")

    async def _ensure_organization_exists(self, organization_id: UUID) -> Organization:
        organization = await self.db.get(Organization, organization_id)
        if not organization:
            raise MembershipException(
                MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return organization

    async def _get_user_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _ensure_user_not_member(self, user_id: UUID, organization_id: UUID):
        """Business logic: a user holds at most one membership per organization."""
        stmt = select(OrganizationUser.id).where(
            OrganizationUser.user_id == user_id,
            OrganizationUser.organization_id == organization_id,
        )
        result = await self.db.execute(stmt)
        if result.scalar_one_or_none():
            raise MembershipException(
                MessageCode.ALREADY_ORGANIZATION_MEMBER, status.HTTP_409_CONFLICT
            )
