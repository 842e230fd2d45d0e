"""Database models for the membership API."""

from .base import Base
from .memberships import OrganizationUser
from .organizations import Organization
from .roles import Role
from .users import User, UserStatus

# Export all models
__all__ = [
    # Base
    "Base",
    # Enums
    "UserStatus",
    # Models
    "Organization",
    "OrganizationUser",
    "Role",
    "User",
]
