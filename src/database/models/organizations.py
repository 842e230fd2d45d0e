"""Organization model."""

import uuid
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    identifier: Mapped[str] = mapped_column(
        String, unique=True, nullable=False, comment="Human readable, name-<hex>"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    # Relationships (defined via string references to avoid circular imports)
    memberships = relationship(
        "OrganizationUser",
        back_populates="organization",
        cascade="all, delete-orphan",
    )
