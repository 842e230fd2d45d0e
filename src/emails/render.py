from pathlib import Path
from typing import Literal, TypedDict

from jinja2 import Environment, FileSystemLoader, select_autoescape

TemplateType = Literal["invitation"]


class EmailData(TypedDict):
    html: str
    subject: str


TEMPLATE_DIR = Path(__file__).parent / "template"

jinja_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)


def invitation_subject(organization_name: str) -> str:
    return f"Invitation: You've been invited to join {organization_name}"


def render_email(template_name: TemplateType, subject: str, **context) -> EmailData:
    """Render an HTML email template from the template directory."""
    template = jinja_env.get_template(f"{template_name}/{template_name}.html")
    html_content = template.render(subject=subject, **context)
    return EmailData(html=html_content, subject=subject)


def render_invitation_email(
    organization_name: str,
    invitee_name: str,
    join_url: str,
    sender_name: str,
) -> EmailData:
    """Render the organization invitation email with its join link."""
    return render_email(
        template_name="invitation",
        subject=invitation_subject(organization_name),
        organization_name=organization_name,
        invitee_name=invitee_name,
        join_url=join_url,
        sender_name=sender_name,
    )
