"""Invitation flow settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InvitationSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Base URL of the frontend; join links point to {REDIRECT_URL}/join
    REDIRECT_URL: str = "http://localhost:3000"
    # Display name used in the invitation email footer
    ORG_NAME: str = "Membership"
    # Seconds a pending invitation stays redeemable
    INVITE_CODE_EXPIRY: int = 86400


__all__ = ["InvitationSettings"]
