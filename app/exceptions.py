# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Taxonomy:
# - 400 validation problems the schema can't express
# - 403 owner-only actions attempted by a member
# - 404 missing household / member / house / category
# - 409 limit and uniqueness conflicts
# - 502 Supabase failures (see SupabaseClientError)
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from lib.supabase_client import SupabaseClientError


class HouseRaterException(Exception):
    """
    Base exception for the HouseRater API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "HOUSERATER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class ValidationFailedError(HouseRaterException):
    """Raised when input passes the schema but breaks a business rule."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_FAILED",
            status_code=400,
            details={"field": field} if field else None,
        )


# =============================================================================
# Household & Member Exceptions
# =============================================================================

class HouseholdNotFoundError(HouseRaterException):
    """Raised when the signed-in user has no household yet."""

    def __init__(self, auth_user_id: str):
        super().__init__(
            message="You are not a member of any household",
            code="HOUSEHOLD_NOT_FOUND",
            status_code=404,
            suggestion="Create a household with POST /households, or ask an owner to invite this email",
            details={"auth_user_id": auth_user_id}
        )


class HouseholdExistsError(HouseRaterException):
    """Raised when a user who already belongs to a household tries to create one."""

    def __init__(self, household_id: str):
        super().__init__(
            message="You already belong to a household",
            code="HOUSEHOLD_EXISTS",
            status_code=409,
            details={"household_id": household_id}
        )


class MemberNotFoundError(HouseRaterException):
    """Raised when a household user ID doesn't exist in the caller's household."""

    def __init__(self, member_id: str):
        super().__init__(
            message=f"Member not found: {member_id}",
            code="MEMBER_NOT_FOUND",
            status_code=404,
            suggestion="Check that the member_id is correct and still in your household",
            details={"member_id": member_id}
        )


class OwnerRequiredError(HouseRaterException):
    """Raised when a non-owner attempts an owner-only action."""

    def __init__(self, action: str):
        super().__init__(
            message=f"Only household owners can {action}",
            code="OWNER_REQUIRED",
            status_code=403,
            suggestion="Ask a household owner to do this, or to promote you to owner",
            details={"action": action}
        )


class HouseholdFullError(HouseRaterException):
    """Raised when inviting past the member limit."""

    def __init__(self, max_users: int):
        super().__init__(
            message=f"Maximum {max_users} users per household",
            code="HOUSEHOLD_FULL",
            status_code=409,
            suggestion="Remove a member before inviting someone new",
            details={"max_users": max_users}
        )


class OwnerLimitError(HouseRaterException):
    """Raised when a third owner would be created."""

    def __init__(self, max_owners: int):
        super().__init__(
            message=f"Maximum {max_owners} owners per household",
            code="OWNER_LIMIT_REACHED",
            status_code=409,
            suggestion="Demote an existing owner to member first",
            details={"max_owners": max_owners}
        )


class LastOwnerError(HouseRaterException):
    """Raised when the only owner tries to demote themself."""

    def __init__(self):
        super().__init__(
            message="You are the only owner. Promote another member to owner before demoting yourself.",
            code="LAST_OWNER",
            status_code=409,
        )


class DuplicateMemberError(HouseRaterException):
    """Raised when inviting an email that is already in the household."""

    def __init__(self, email: str):
        super().__init__(
            message="This email is already a member of your household",
            code="DUPLICATE_MEMBER",
            status_code=409,
            details={"email": email}
        )


class SelfRemovalError(HouseRaterException):
    """Raised when a member tries to remove themself."""

    def __init__(self):
        super().__init__(
            message="You cannot remove yourself from the household",
            code="SELF_REMOVAL",
            status_code=400,
        )


# =============================================================================
# House & Category Exceptions
# =============================================================================

class HouseNotFoundError(HouseRaterException):
    """Raised when a house ID doesn't exist in the caller's household."""

    def __init__(self, house_id: str):
        super().__init__(
            message=f"House not found: {house_id}",
            code="HOUSE_NOT_FOUND",
            status_code=404,
            suggestion="Check that the house_id is correct; archived houses are listed with archived=true",
            details={"house_id": house_id}
        )


class CategoryNotFoundError(HouseRaterException):
    """Raised when a category ID doesn't exist in the caller's household."""

    def __init__(self, category_id: str):
        super().__init__(
            message=f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
            status_code=404,
            suggestion="The category may have been deleted; reload the category list",
            details={"category_id": category_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def houserater_exception_handler(
    request: Request,
    exc: HouseRaterException
) -> JSONResponse:
    """
    Convert HouseRaterException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def supabase_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """
    Convert store failures to a 502 response.

    Clients should reload authoritative state and retry.
    """
    content = {
        "detail": "The database could not complete the request",
        "code": exc.code,
        "suggestion": exc.suggestion or "Reload and try again",
    }
    return JSONResponse(status_code=502, content=content)


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    errors = jsonable_encoder(exc.errors()) if hasattr(exc, "errors") else str(exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
