# =============================================================================
# tests/test_invitations.py - Invitation Email Tests
# =============================================================================
# This module contains tests for:
# - Rendering the invitation email
# - EmailClient against a mocked Resend API
# - The POST /api/v1/send-invitation contract
# =============================================================================

from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.config import settings
from core.models import InvitationRequest
from core.services.invitation_service import InvitationService
from lib.email_client import EmailClient, EmailSendError

URL = "/api/v1/send-invitation"


@pytest.fixture
def invite_body():
    return {
        "inviteeName": "Jane",
        "inviteeEmail": "jane@example.com",
        "inviterName": "John",
        "householdName": "The Smith Family",
    }


@pytest.fixture
def resend_configured():
    """Pretend a Resend API key is configured."""
    with patch.object(settings, "RESEND_API_KEY", "re_test_key"):
        yield


def resend_response(status_code: int, payload: dict) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_error = status_code >= 400
    response.json.return_value = payload
    return response


# =============================================================================
# Rendering Tests
# =============================================================================

class TestBuildEmail:
    """Test the rendered invitation email."""

    def test_subject_and_link(self, invite_body):
        email = InvitationService.build_email(InvitationRequest(**invite_body))

        assert email.to == "jane@example.com"
        assert email.subject == "You're invited to join The Smith Family on HouseRater"
        assert "http://localhost:3000/auth/signup" in email.html
        assert "http://localhost:3000/auth/signup" in email.text
        assert "jane@example.com" in email.text

    def test_html_is_escaped(self, invite_body):
        invite_body["householdName"] = "<script>alert(1)</script>"

        email = InvitationService.build_email(InvitationRequest(**invite_body))

        assert "<script>" not in email.html
        assert "&lt;script&gt;" in email.html


# =============================================================================
# Email Client Tests
# =============================================================================

class TestEmailClient:
    """Test EmailClient with the HTTP call mocked."""

    def test_development_mode_without_key(self):
        with patch("lib.email_client.httpx.post") as mock_post:
            result = EmailClient.send("jane@example.com", "Hi", "<p>Hi</p>", "Hi")

        assert result.is_development
        mock_post.assert_not_called()

    def test_sends_with_key(self, resend_configured):
        with patch(
            "lib.email_client.httpx.post",
            return_value=resend_response(200, {"id": "em_123"}),
        ) as mock_post:
            result = EmailClient.send("jane@example.com", "Hi", "<p>Hi</p>", "Hi")

        assert result.email_id == "em_123"
        payload = mock_post.call_args.kwargs["json"]
        assert payload["to"] == ["jane@example.com"]
        assert payload["from"] == settings.EMAIL_FROM
        headers = mock_post.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer re_test_key"

    def test_provider_error(self, resend_configured):
        error = {"statusCode": 422, "message": "Invalid `to` field"}

        with patch("lib.email_client.httpx.post", return_value=resend_response(422, error)):
            with pytest.raises(EmailSendError) as exc_info:
                EmailClient.send("bad", "Hi", "<p>Hi</p>", "Hi")

        assert exc_info.value.details == error

    def test_network_error(self, resend_configured):
        with patch("lib.email_client.httpx.post", side_effect=httpx.ConnectError("down")):
            with pytest.raises(EmailSendError):
                EmailClient.send("jane@example.com", "Hi", "<p>Hi</p>", "Hi")


# =============================================================================
# Endpoint Tests
# =============================================================================

class TestSendInvitationEndpoint:
    """Test POST /send-invitation."""

    def test_missing_fields(self, client, invite_body):
        del invite_body["inviterName"]

        response = client.post(URL, json=invite_body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_blank_field(self, client, invite_body):
        invite_body["householdName"] = ""

        response = client.post(URL, json=invite_body)

        assert response.status_code == 400

    def test_wrong_field_type(self, client, invite_body):
        invite_body["inviteeName"] = 5

        response = client.post(URL, json=invite_body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", ""])
    def test_unusable_body(self, client, content):
        response = client.post(
            URL, content=content, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_development_mode(self, client, invite_body):
        response = client.post(URL, json=invite_body)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["mode"] == "development"
        assert "message" in body

    def test_sent(self, client, invite_body, resend_configured):
        with patch(
            "lib.email_client.httpx.post",
            return_value=resend_response(200, {"id": "em_456"}),
        ):
            response = client.post(URL, json=invite_body)

        assert response.status_code == 200
        assert response.json() == {"success": True, "emailId": "em_456"}

    def test_provider_failure(self, client, invite_body, resend_configured):
        error = {"statusCode": 403, "message": "API key is invalid"}

        with patch("lib.email_client.httpx.post", return_value=resend_response(403, error)):
            response = client.post(URL, json=invite_body)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send email", "details": error}
