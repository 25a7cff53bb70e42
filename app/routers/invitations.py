# =============================================================================
# app/routers/invitations.py - Invitation Email Endpoint
# =============================================================================
# POST /send-invitation, called by the front-end after it has created the
# pending member. Responds with camelCase JSON:
#   200 {"success": true, "emailId": "..."}
#   200 {"success": true, "message": "...", "mode": "development"}
#   400 {"error": "Missing required fields"}
#   500 {"error": "...", "details": ...}
#
# Every malformed body (bad JSON, non-object, wrong field types) gets the
# 400 shape above.
# =============================================================================

from fastapi import APIRouter, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.models import InvitationRequest
from core.services.invitation_service import InvitationService

router = APIRouter()

MISSING_FIELDS = {"error": "Missing required fields"}


async def _parse_invitation(request: Request) -> InvitationRequest | None:
    """The request body as an InvitationRequest, or None if unusable."""
    try:
        body = await request.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    try:
        return InvitationRequest.model_validate(body)
    except ValidationError:
        return None


@router.post(
    "/send-invitation",
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": InvitationRequest.model_json_schema(by_alias=True)}
            },
        },
    },
)
async def send_invitation(request: Request):
    """
    Send an invitation email.

    When no email provider is configured the email is logged instead and
    the response reports "development" mode.
    """
    invitation = await _parse_invitation(request)
    if invitation is None or not invitation.is_complete:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=MISSING_FIELDS,
        )

    result = await run_in_threadpool(InvitationService.send_invitation, invitation)

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": result.error or "Failed to send email", "details": result.details},
        )

    if result.mode == "development":
        return JSONResponse(
            content={"success": True, "message": result.message, "mode": result.mode},
        )

    return JSONResponse(content={"success": True, "emailId": result.email_id})
