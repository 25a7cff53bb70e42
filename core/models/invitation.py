# =============================================================================
# core/models/invitation.py - Invitation Email Schemas
# =============================================================================
# Contract of the public send-invitation endpoint. The JSON keys are
# camelCase because the endpoint is called directly by the web front-end.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class InvitationRequest(BaseModel):
    """
    Body of POST /send-invitation.

    Every field is optional at the schema level so that a missing field
    yields the endpoint's own 400 "Missing required fields" response
    instead of a generic 422.

    Example:
        {
            "inviteeName": "Jane",
            "inviteeEmail": "jane@example.com",
            "inviterName": "John",
            "householdName": "The Smith Family"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    invitee_name: str | None = Field(default=None, alias="inviteeName")
    invitee_email: str | None = Field(default=None, alias="inviteeEmail")
    inviter_name: str | None = Field(default=None, alias="inviterName")
    household_name: str | None = Field(default=None, alias="householdName")

    @property
    def is_complete(self) -> bool:
        """True when every field is present and non-blank."""
        return all(
            value and value.strip()
            for value in (
                self.invitee_name,
                self.invitee_email,
                self.inviter_name,
                self.household_name,
            )
        )


class InvitationEmail(BaseModel):
    """A rendered invitation email, ready to hand to the email client."""

    to: str
    subject: str
    html: str
    text: str


class InvitationResult(BaseModel):
    """Outcome of sending (or logging) an invitation email."""

    success: bool
    email_id: str | None = None

    # "development" when no email provider is configured
    mode: str | None = None
    message: str | None = None
    error: str | None = None
    details: dict | str | None = None
