from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
import redis.asyncio as redis

from src.redis.client import get_redis_client
from src.services.email import EmailService
from src.services.health.service import HealthService
from src.services.organization.invitation_manager import OrganizationInvitationService
from src.services.organization.service import OrganizationService
from src.utils.settings.invitation import InvitationSettings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_email_service(request: Request) -> EmailService:
    """Get the email transport from app state."""
    return request.app.state.email_service


async def get_invitation_settings(request: Request) -> InvitationSettings:
    """Get invitation settings loaded at startup."""
    return request.app.state.invitation_settings


async def get_organization_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationService:
    """Get organization service with database session."""
    return OrganizationService(db)


async def get_organization_invitation_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    redis_client: Annotated[redis.Redis, Depends(get_redis_client)],
    email_service: Annotated[EmailService, Depends(get_email_service)],
    settings: Annotated[InvitationSettings, Depends(get_invitation_settings)],
) -> OrganizationInvitationService:
    """Get invitation service with database, Redis, email and settings."""
    return OrganizationInvitationService(db, redis_client, email_service, settings)


async def get_health_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    redis_client: Annotated[redis.Redis, Depends(get_redis_client)],
) -> HealthService:
    return HealthService(db, redis_client)


OrganizationServiceDep = Annotated[
    OrganizationService, Depends(get_organization_service)
]
OrganizationInvitationServiceDep = Annotated[
    OrganizationInvitationService, Depends(get_organization_invitation_service)
]
HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
