import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.router import api_router
from src.database.connection import AsyncSessionLocal, dispose_engine
from src.redis.client import close_redis_pool
from src.services.email import EmailService
from src.utils.settings.app import AppSettings
from src.utils.settings.invitation import InvitationSettings
from src.utils.logger import setup_logging


app_settings = AppSettings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    app_settings.validate_prod()
    logger = setup_logging(app_settings.is_production)
    logger.info("Starting membership API...")

    app.state.session_factory = AsyncSessionLocal
    app.state.email_service = EmailService()
    app.state.invitation_settings = InvitationSettings()
    logger.info("Session factory, email transport and settings added to app state")

    yield

    # Shutdown
    logger.info("Shutting down membership API...")
    await close_redis_pool()
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Membership API",
        description="Organization membership, invitations and role labels",
        version=app_settings.API_VERSION,
        lifespan=lifespan,
        docs_url=None if app_settings.is_production else "/docs",
        redoc_url=None if app_settings.is_production else "/redoc",
        openapi_url=None if app_settings.is_production else "/openapi.json",
    )

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(logging_middleware)

    app.include_router(api_router)
    return app


app = create_app()


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
