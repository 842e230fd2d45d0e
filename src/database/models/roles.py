"""Role label model."""

import uuid
from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Role(Base):
    """Free-text role label owned by a single membership.

    The same name may be attached to a membership more than once.
    """

    __tablename__ = "roles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    organization_user_id: Mapped[UUID] = mapped_column(
        ForeignKey("organization_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    membership = relationship("OrganizationUser", back_populates="roles")
