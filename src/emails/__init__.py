from src.emails.render import (
    EmailData,
    TemplateType,
    render_email,
    render_invitation_email,
)

__all__ = [
    "EmailData",
    "TemplateType",
    "render_email",
    "render_invitation_email",
]
