from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.utils.settings.database import DatabaseSettings

database_settings = DatabaseSettings()

async_engine = create_async_engine(
    database_settings.DATABASE_URL_ASYNC,
    echo=database_settings.DATABASE_ECHO,
    pool_pre_ping=True,
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def dispose_engine() -> None:
    """Release pooled connections - called during app shutdown."""
    await async_engine.dispose()
