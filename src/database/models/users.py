"""User model."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from sqlalchemy import JSON, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class UserStatus(str, Enum):
    VERIFIED = "verified"


class User(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    # Credentials, {"password": <bcrypt hash>}; never leaves the service layer
    auth_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    # {"firstname", "lastname", "status"}
    profile_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    memberships = relationship(
        "OrganizationUser",
        back_populates="user",
        cascade="all, delete-orphan",
    )
