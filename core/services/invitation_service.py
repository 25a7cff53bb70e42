# =============================================================================
# core/services/invitation_service.py - Invitation Emails
# =============================================================================
# Renders the "you've been invited" email and hands it to the email client.
# Used by the public send-invitation endpoint and by MemberService after
# an owner invites someone.
# =============================================================================

import logging
from datetime import date
from html import escape

from app.config import settings
from core.models import InvitationEmail, InvitationRequest, InvitationResult
from lib.email_client import EmailClient, EmailSendError

logger = logging.getLogger(__name__)

APP_NAME = "HouseRater"


def build_subject(household_name: str) -> str:
    return f"You're invited to join {household_name} on {APP_NAME}"


def render_text(
    invitee_name: str,
    invitee_email: str,
    inviter_name: str,
    household_name: str,
    signup_url: str,
) -> str:
    """Plain text body of the invitation email."""
    year = date.today().year
    return f"""
You've been invited to join {household_name} on {APP_NAME}!

Hi {invitee_name},

{inviter_name} has invited you to join their household "{household_name}" on {APP_NAME}.

{APP_NAME} helps you and your household collaboratively rate and compare houses you're considering. Each member can rate categories like location, size, features, and more to find the perfect home together.

To accept this invitation:
1. Go to {signup_url}
2. Sign up using this email address: {invitee_email}
3. You'll automatically be added to the household!

If you didn't expect this invitation, you can safely ignore this email.

© {year} {APP_NAME}
""".strip()


def render_html(
    invitee_name: str,
    invitee_email: str,
    inviter_name: str,
    household_name: str,
    signup_url: str,
) -> str:
    """HTML body of the invitation email. All values are escaped."""
    invitee = escape(invitee_name)
    email = escape(invitee_email)
    inviter = escape(inviter_name)
    household = escape(household_name)
    url = escape(signup_url, quote=True)
    year = date.today().year

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(build_subject(household_name))}</title>
</head>
<body style="margin: 0; padding: 0; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; background-color: #f9fafb;">
  <table role="presentation" style="width: 100%; border-collapse: collapse;">
    <tr>
      <td align="center" style="padding: 40px 0;">
        <table role="presentation" style="width: 600px; border-collapse: collapse; background-color: #ffffff; border-radius: 8px;">
          <tr>
            <td style="padding: 40px 40px 30px 40px; text-align: center; border-bottom: 1px solid #e5e7eb;">
              <h1 style="margin: 0; color: #2563eb; font-size: 32px;">{APP_NAME}</h1>
            </td>
          </tr>
          <tr>
            <td style="padding: 40px;">
              <h2 style="margin: 0 0 20px 0; color: #111827; font-size: 24px;">You've been invited!</h2>
              <p style="color: #374151; font-size: 16px;">Hi {invitee},</p>
              <p style="color: #374151; font-size: 16px;">
                <strong>{inviter}</strong> has invited you to join their household "<strong>{household}</strong>" on {APP_NAME}.
              </p>
              <p style="color: #374151; font-size: 16px;">
                {APP_NAME} helps you and your household collaboratively rate and compare houses you're considering.
                Each member can rate categories like location, size, features, and more to find the perfect home together.
              </p>
              <table role="presentation" style="margin: 0 0 25px 0;">
                <tr>
                  <td style="border-radius: 6px; background-color: #2563eb;">
                    <a href="{url}" style="display: inline-block; padding: 14px 32px; color: #ffffff; text-decoration: none; font-weight: 600;">Join {household}</a>
                  </td>
                </tr>
              </table>
              <p style="color: #6b7280; font-size: 14px;">
                To accept this invitation, click the button above and sign up using this email address: <strong>{email}</strong>
              </p>
              <p style="color: #6b7280; font-size: 14px;">
                Once you sign up, you'll automatically be added to the household and can start rating houses right away!
              </p>
              <hr style="border: none; border-top: 1px solid #e5e7eb; margin: 30px 0;">
              <p style="color: #9ca3af; font-size: 12px;">
                If the button doesn't work, copy and paste this link into your browser:<br>
                <a href="{url}" style="color: #2563eb;">{url}</a>
              </p>
              <p style="color: #9ca3af; font-size: 12px;">If you didn't expect this invitation, you can safely ignore this email.</p>
            </td>
          </tr>
          <tr>
            <td style="padding: 30px 40px; text-align: center; border-top: 1px solid #e5e7eb; background-color: #f9fafb;">
              <p style="margin: 0; color: #6b7280; font-size: 14px;">&copy; {year} {APP_NAME}. All rights reserved.</p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""


class InvitationService:
    """Builds and sends invitation emails."""

    @staticmethod
    def build_email(request: InvitationRequest) -> InvitationEmail:
        """
        Render the invitation email for a complete request.

        The caller is responsible for checking request.is_complete first.
        """
        fields = dict(
            invitee_name=request.invitee_name.strip(),
            invitee_email=request.invitee_email.strip(),
            inviter_name=request.inviter_name.strip(),
            household_name=request.household_name.strip(),
            signup_url=settings.signup_url,
        )
        return InvitationEmail(
            to=fields["invitee_email"],
            subject=build_subject(fields["household_name"]),
            html=render_html(**fields),
            text=render_text(**fields),
        )

    @staticmethod
    def send_invitation(request: InvitationRequest) -> InvitationResult:
        """
        Render and send an invitation.

        Never raises for provider failures: the failure is returned as an
        unsuccessful InvitationResult carrying the provider's details.

        Returns:
            InvitationResult - success with email_id, success in
            "development" mode (email logged), or failure with details
        """
        email = InvitationService.build_email(request)

        try:
            sent = EmailClient.send(
                to=email.to,
                subject=email.subject,
                html=email.html,
                text=email.text,
            )
        except EmailSendError as e:
            logger.error(f"Failed to send invitation to {email.to}: {e.message}")
            return InvitationResult(
                success=False,
                error=e.message,
                details=e.details,
            )

        if sent.is_development:
            return InvitationResult(
                success=True,
                mode=sent.mode,
                message="Email service not configured. Email logged to console.",
            )

        logger.info(f"Invitation email {sent.email_id} sent to {email.to}")
        return InvitationResult(success=True, email_id=sent.email_id)
