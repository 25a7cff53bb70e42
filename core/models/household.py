# =============================================================================
# core/models/household.py - Household & Member Schemas
# =============================================================================
# These models define the API contract for household operations:
# - Household: A group of 2-8 people shopping for a house together
# - HouseholdUser: One member of a household (owner or member)
# - HouseholdCreate / MemberInvite / RoleUpdate: Request bodies
#
# A HouseholdUser row exists before its person signs up: invitations create
# the row with auth_user_id = null, and the link is made on first sign-in
# with a matching email.
# =============================================================================

import re
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


# Household size limits
MIN_USERS = 2
MAX_USERS = 8
MAX_OWNERS = 2

# Same pattern the sign-up form uses; deliverability is Supabase Auth's job
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserRole(str, Enum):
    """
    Role of a member within a household.

    - owner: Can invite/remove members and change roles (max 2)
    - member: Can rate houses and manage their own weights
    """
    OWNER = "owner"
    MEMBER = "member"


class Household(BaseModel):
    """A household as stored in the households table."""

    id: UUID = Field(..., description="Unique household identifier")
    name: str = Field(..., description="Display name, e.g. 'The Smith Family'")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class HouseholdUser(BaseModel):
    """
    A member of a household.

    Example:
        {
            "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
            "household_id": "550e8400-e29b-41d4-a716-446655440000",
            "auth_user_id": null,
            "name": "Jane Smith",
            "email": "jane@example.com",
            "role": "member"
        }
    """

    id: UUID = Field(..., description="Unique household user identifier")
    household_id: UUID = Field(..., description="Household this user belongs to")

    # Null until the invitee signs up with the invited email
    auth_user_id: UUID | None = Field(
        default=None,
        description="Linked Supabase Auth user, null for pending invitations"
    )

    name: str = Field(..., description="Name shown within the household")
    email: str = Field(..., description="Lower-cased email address")
    role: UserRole = Field(default=UserRole.MEMBER, description="Household role")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER

    @property
    def is_pending(self) -> bool:
        """True for invited users who have not signed up yet."""
        return self.auth_user_id is None


class HouseholdCreate(BaseModel):
    """Request body for creating a household during setup."""

    household_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Household name, e.g. 'The Smith Family'"
    )
    user_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="How the creator appears in the household"
    )

    @field_validator("household_name", "user_name")
    @classmethod
    def strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class HouseholdUpdate(BaseModel):
    """Request body for renaming a household."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class MemberInvite(BaseModel):
    """
    Request body for inviting someone to the household.

    Validation of name/email happens in MemberService so that the
    error messages match the rest of the member rules.
    """

    name: str = Field(default="", description="Invitee's name")
    email: str = Field(default="", description="Invitee's email address")
    role: UserRole = Field(default=UserRole.MEMBER, description="Role to grant")


class RoleUpdate(BaseModel):
    """Request body for changing a member's role."""

    role: UserRole


class HouseholdSummary(BaseModel):
    """Household with its members and limit counters."""

    household: Household
    members: list[HouseholdUser] = Field(default_factory=list)
    member_count: int = Field(default=0, ge=0)
    owner_count: int = Field(default=0, ge=0)
    max_users: int = MAX_USERS
    max_owners: int = MAX_OWNERS
