# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from uuid import UUID
from typing import Optional

from core.models import Household, HouseholdUser


class AuthUser(BaseModel):
    """
    Authenticated user extracted from Supabase JWT.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None


class UserResponse(BaseModel):
    """
    The signed-in identity plus their household membership.

    member and household are null until the user creates a household or
    accepts an invitation.
    """
    id: UUID
    email: Optional[str] = None
    member: Optional[HouseholdUser] = None
    household: Optional[Household] = None
