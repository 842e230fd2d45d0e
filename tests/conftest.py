"""Global test configuration and fixtures for the membership API."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import fakeredis.aioredis
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.api.core.dependencies import get_redis_client
from src.database.models import Base, Organization, OrganizationUser, User
from src.main import create_app
from src.services.email import EmailService
from src.services.organization import (
    OrganizationInvitationService,
    OrganizationService,
)
from src.utils.settings.invitation import InvitationSettings

from tests.factories import (
    OrganizationFactory,
    OrganizationUserFactory,
    RoleFactory,
    UserFactory,
)

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def user_factory():
    return UserFactory


@pytest.fixture
def organization_factory():
    return OrganizationFactory


@pytest.fixture
def membership_factory():
    return OrganizationUserFactory


@pytest.fixture
def role_factory():
    return RoleFactory


@pytest_asyncio.fixture
async def async_engine():
    """In-memory database shared by every session of a test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def redis_client():
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def email_service():
    """Email transport double; records every send_email call."""
    service = AsyncMock(spec=EmailService)
    service.send_email.return_value = "email-test-id"
    return service


@pytest.fixture
def invitation_settings() -> InvitationSettings:
    return InvitationSettings(
        REDIRECT_URL="https://app.example.com",
        ORG_NAME="Example Platform",
        INVITE_CODE_EXPIRY=3600,
    )


@pytest.fixture
def organization_service(db_session) -> OrganizationService:
    return OrganizationService(db_session)


@pytest.fixture
def invitation_service(
    db_session, redis_client, email_service, invitation_settings
) -> OrganizationInvitationService:
    return OrganizationInvitationService(
        db_session, redis_client, email_service, invitation_settings
    )


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_admin_user(db_session: AsyncSession, user_factory) -> User:
    user = await user_factory.create_async(
        db_session,
        email="admin@example.com",
        profile_data={"firstname": "Ada", "lastname": "Admin", "status": "verified"},
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def test_organization(
    db_session: AsyncSession,
    organization_factory,
    membership_factory,
    test_admin_user: User,
) -> Organization:
    """Organization whose only admin is test_admin_user."""
    organization = await organization_factory.create_async(
        db_session, name="Test Organization"
    )
    await membership_factory.create_async(
        db_session, user=test_admin_user, organization=organization, is_admin=True
    )
    await db_session.commit()
    return organization


@pytest_asyncio.fixture
async def test_member(
    db_session: AsyncSession,
    membership_factory,
    role_factory,
    test_organization: Organization,
) -> OrganizationUser:
    """Non-admin membership carrying a single "viewer" role label."""
    membership = await membership_factory.create_async(
        db_session, organization=test_organization, is_admin=False
    )
    await role_factory.create_async(db_session, membership=membership, name="viewer")
    await db_session.commit()
    return membership


# HTTP Client Fixtures
@pytest.fixture
def app(session_factory, redis_client, email_service, invitation_settings) -> FastAPI:
    """Application wired to the test database, fake Redis and email double."""
    app = create_app()
    app.state.session_factory = session_factory
    app.state.email_service = email_service
    app.state.invitation_settings = invitation_settings

    async def _test_redis_client():
        return redis_client

    app.dependency_overrides[get_redis_client] = _test_redis_client
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-membership-api",
    ) as ac:
        yield ac
