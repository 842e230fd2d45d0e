import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

import redis.asyncio as redis
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: Literal["healthy", "unhealthy"]
    connected: bool
    error: str | None = None


@dataclass
class OverallHealthStatus:
    """Overall health status with individual service results."""

    status: Literal["healthy", "unhealthy"]
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Checks the relational store and the invitation store."""

    def __init__(self, db: AsyncSession, redis_client: redis.Redis):
        self.db = db
        self.redis = redis_client

    async def check_database_health(self) -> HealthCheckResult:
        try:
            await self.db.execute(text("SELECT 1"))
            return HealthCheckResult(
                service="database", status="healthy", connected=True
            )
        except SQLAlchemyError as e:
            logger.error(f"Database health check error: {e}")
            return HealthCheckResult(
                service="database", status="unhealthy", connected=False, error=str(e)
            )

    async def check_redis_health(self) -> HealthCheckResult:
        try:
            await self.redis.ping()
            return HealthCheckResult(
                service="redis", status="healthy", connected=True
            )
        except redis.RedisError as e:
            logger.error(f"Redis health check error: {e}")
            return HealthCheckResult(
                service="redis", status="unhealthy", connected=False, error=str(e)
            )

    async def run_all_checks(self) -> OverallHealthStatus:
        """Run all health checks in parallel and return overall status."""
        results = await asyncio.gather(
            self.check_database_health(),
            self.check_redis_health(),
        )

        services = {result.service: result for result in results}
        overall_status: Literal["healthy", "unhealthy"] = (
            "healthy"
            if all(result.status == "healthy" for result in results)
            else "unhealthy"
        )

        return OverallHealthStatus(
            status=overall_status,
            services=services,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
