# =============================================================================
# core/services/household_service.py - Household Business Logic
# =============================================================================
# Handles household setup and resolving the signed-in user to a
# HouseholdUser. Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import normalize_email, utc_now_iso
from core.models import (
    DEFAULT_CATEGORIES,
    Household,
    HouseholdSummary,
    HouseholdUser,
    UserRole,
)
from app.exceptions import (
    HouseholdExistsError,
    HouseholdNotFoundError,
    OwnerRequiredError,
)

logger = logging.getLogger(__name__)


class HouseholdService:
    """
    Service for household setup and membership lookup.

    Every other service receives the HouseholdUser returned by
    get_member_for_user() and scopes its queries to member.household_id.
    """

    @staticmethod
    def find_member_for_user(
        auth_user_id: UUID | str,
        email: str | None = None,
    ) -> HouseholdUser | None:
        """
        Find the HouseholdUser for a Supabase Auth identity.

        Looks up by auth_user_id first. If there is no linked row but an
        invitation is pending for the same email, the invitation is linked
        to this identity (this is how invitees join a household).

        Returns:
            HouseholdUser, or None if the identity has no household
        """
        row = SupabaseClient.fetch_row(
            "household_users", filters={"auth_user_id": auth_user_id}
        )
        if row:
            return HouseholdUser(**row)

        if not email:
            return None

        pending = SupabaseClient.fetch_rows(
            "household_users",
            filters={"email": normalize_email(email), "auth_user_id": None},
            order_by="created_at",
        )
        if not pending:
            return None

        invitation = pending[0]
        updated = SupabaseClient.update_rows(
            "household_users",
            {"auth_user_id": auth_user_id, "updated_at": utc_now_iso()},
            filters={"id": invitation["id"]},
        )
        logger.info(f"Linked auth user {auth_user_id} to household user {invitation['id']}")
        return HouseholdUser(**(updated[0] if updated else {**invitation, "auth_user_id": auth_user_id}))

    @staticmethod
    def get_member_for_user(
        auth_user_id: UUID | str,
        email: str | None = None,
    ) -> HouseholdUser:
        """
        Like find_member_for_user(), but a missing household is an error.

        Raises:
            HouseholdNotFoundError: If the identity has no household
        """
        member = HouseholdService.find_member_for_user(auth_user_id, email)
        if member is None:
            raise HouseholdNotFoundError(str(auth_user_id))
        return member

    @staticmethod
    def create_household(
        auth_user_id: UUID | str,
        email: str,
        household_name: str,
        user_name: str,
    ) -> tuple[Household, HouseholdUser]:
        """
        Create a household with the caller as its first owner.

        Also seeds the household's default categories.

        Args:
            auth_user_id: Supabase Auth user creating the household
            email: Email from the auth token
            household_name: e.g. "The Smith Family"
            user_name: How the creator appears in the household

        Returns:
            Tuple of (household, owner)

        Raises:
            HouseholdExistsError: If the user already belongs to a household
        """
        existing = HouseholdService.find_member_for_user(auth_user_id, email)
        if existing:
            raise HouseholdExistsError(str(existing.household_id))

        household_row = SupabaseClient.insert_row(
            "households", {"name": household_name.strip()}
        )
        household = Household(**household_row)

        owner_row = SupabaseClient.insert_row(
            "household_users",
            {
                "household_id": household.id,
                "auth_user_id": auth_user_id,
                "name": user_name.strip(),
                "email": normalize_email(email),
                "role": UserRole.OWNER.value,
            },
        )
        owner = HouseholdUser(**owner_row)

        HouseholdService.seed_default_categories(household.id)

        logger.info(f"Created household: {household.id} with owner: {owner.id}")
        return household, owner

    @staticmethod
    def seed_default_categories(household_id: UUID | str) -> list[dict[str, Any]]:
        """Insert the default category set for a household."""
        rows = [
            {
                "household_id": household_id,
                "name": name,
                "category_group": group.value,
                "is_default": True,
                "is_active": True,
                "display_order": index,
            }
            for index, (name, group) in enumerate(DEFAULT_CATEGORIES, start=1)
        ]
        inserted = SupabaseClient.insert_rows("categories", rows)
        logger.info(f"Seeded {len(inserted)} default categories for household {household_id}")
        return inserted

    @staticmethod
    def get_household(member: HouseholdUser) -> Household:
        """Get the member's household."""
        row = SupabaseClient.fetch_row("households", filters={"id": member.household_id})
        if not row:
            raise HouseholdNotFoundError(str(member.auth_user_id))
        return Household(**row)

    @staticmethod
    def list_members(member: HouseholdUser) -> list[HouseholdUser]:
        """All users of the member's household, oldest first."""
        rows = SupabaseClient.fetch_rows(
            "household_users",
            filters={"household_id": member.household_id},
            order_by="created_at",
        )
        return [HouseholdUser(**row) for row in rows]

    @staticmethod
    def get_summary(member: HouseholdUser) -> HouseholdSummary:
        """Household plus members and limit counters."""
        household = HouseholdService.get_household(member)
        members = HouseholdService.list_members(member)
        return HouseholdSummary(
            household=household,
            members=members,
            member_count=len(members),
            owner_count=sum(1 for m in members if m.is_owner),
        )

    @staticmethod
    def rename_household(member: HouseholdUser, name: str) -> Household:
        """
        Rename the household.

        Raises:
            OwnerRequiredError: If the member is not an owner
        """
        if not member.is_owner:
            raise OwnerRequiredError("rename the household")

        updated = SupabaseClient.update_rows(
            "households",
            {"name": name.strip(), "updated_at": utc_now_iso()},
            filters={"id": member.household_id},
        )
        if not updated:
            raise HouseholdNotFoundError(str(member.auth_user_id))

        logger.info(f"Renamed household: {member.household_id}")
        return Household(**updated[0])
