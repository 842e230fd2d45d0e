"""Email services module."""

from .service import EmailService

__all__ = ["EmailService"]
