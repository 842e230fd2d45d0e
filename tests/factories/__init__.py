"""Test factories for membership API models."""

from .base import AsyncSQLAlchemyModelFactory
from .memberships import OrganizationUserFactory
from .organizations import OrganizationFactory
from .roles import RoleFactory
from .users import UserFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "OrganizationFactory",
    "OrganizationUserFactory",
    "RoleFactory",
    "UserFactory",
]
