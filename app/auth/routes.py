# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Actual signup/login is handled by Supabase Auth client-side.
# These routes are for getting user info after authentication.
# =============================================================================

import logging
from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse
from core.services.household_service import HouseholdService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current authenticated user and their household.

    Signing in with an invited email links the invitation here, so the
    front-end calls this right after login to decide between the
    dashboard and household setup.

    Raises:
        401: If not authenticated
    """
    member = HouseholdService.find_member_for_user(user.id, user.email)
    if member is None:
        logger.debug(f"User {user.id} has no household yet")
        return UserResponse(id=user.id, email=user.email)

    return UserResponse(
        id=user.id,
        email=user.email,
        member=member,
        household=HouseholdService.get_household(member),
    )


@router.get("/verify")
def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.

    Returns:
        dict: Confirmation with user_id

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email
    }
