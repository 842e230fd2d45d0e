"""Email settings configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    RESEND_API_KEY: str = ""
    EMAIL_FROM_DOMAIN: str = "mail.example.com"
    EMAIL_FROM_NAME: str = "Membership"
    EMAIL_FROM_ADDRESS: str = "invites"

    @property
    def from_address(self) -> str:
        return (
            f"{self.EMAIL_FROM_NAME} "
            f"<{self.EMAIL_FROM_ADDRESS}@{self.EMAIL_FROM_DOMAIN}>"
        )
