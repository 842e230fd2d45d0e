from src.emails.render import render_email, render_invitation_email


class TestEmailRender:
    def test_render_invitation_email(self):
        """Invitation email carries the subject, greeting, link and sender."""
        email_data = render_invitation_email(
            organization_name="Acme",
            invitee_name="Ivy",
            join_url="https://app.example.com/join?code=123456",
            sender_name="Example Platform",
        )

        assert email_data["subject"] == "Invitation: You've been invited to join Acme"
        assert "Hi Ivy," in email_data["html"]
        assert 'href="https://app.example.com/join?code=123456"' in email_data["html"]
        assert "Example Platform" in email_data["html"]

    def test_render_escapes_user_supplied_values(self):
        email_data = render_email(
            template_name="invitation",
            subject="Invitation",
            organization_name="Acme",
            invitee_name="<script>alert(1)</script>",
            join_url="https://app.example.com/join?user=a&code=1",
            sender_name="Example Platform",
        )

        assert "<script>" not in email_data["html"]
        assert "&lt;script&gt;" in email_data["html"]
        assert "user=a&amp;code=1" in email_data["html"]
