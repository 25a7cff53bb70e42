# =============================================================================
# app/routers/households.py - Household Endpoints
# =============================================================================
# Household setup and details. Creating a household only needs a signed-in
# user; everything else needs an existing membership.
# =============================================================================

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.auth import AuthUser, get_current_user
from app.dependencies import CurrentMember
from core.models import (
    Household,
    HouseholdCreate,
    HouseholdSummary,
    HouseholdUpdate,
    HouseholdUser,
)
from core.services.household_service import HouseholdService

router = APIRouter()


class HouseholdCreateResponse(BaseModel):
    """Response when a household is created."""
    household: Household
    member: HouseholdUser
    message: str = "Household created successfully"


@router.post("", response_model=HouseholdCreateResponse, status_code=status.HTTP_201_CREATED)
def create_household(
    request: HouseholdCreate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create a household with the caller as owner.

    The default categories are added automatically.
    """
    household, owner = HouseholdService.create_household(
        auth_user_id=user.id,
        email=user.email or "",
        household_name=request.household_name,
        user_name=request.user_name,
    )
    return HouseholdCreateResponse(household=household, member=owner)


@router.get("/me", response_model=HouseholdSummary)
def get_my_household(member: CurrentMember):
    """Get the caller's household with its members and limits."""
    return HouseholdService.get_summary(member)


@router.patch("/me", response_model=Household)
def rename_household(request: HouseholdUpdate, member: CurrentMember):
    """Rename the household. Owners only."""
    return HouseholdService.rename_household(member, request.name)
