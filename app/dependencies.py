# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.auth import AuthUser, get_current_user
from core.models import HouseholdUser
from core.services.household_service import HouseholdService


def get_current_member(
    user: AuthUser = Depends(get_current_user),
) -> HouseholdUser:
    """
    Resolve the signed-in user to their HouseholdUser.

    A pending invitation for the user's email is accepted on the way.

    Raises:
        HouseholdNotFoundError (404): The user has no household yet
    """
    return HouseholdService.get_member_for_user(user.id, user.email)


# Type alias for dependency injection
CurrentMember = Annotated[HouseholdUser, Depends(get_current_member)]
