# =============================================================================
# core/services/house_service.py - House Business Logic
# =============================================================================
# CRUD for candidate houses. Field validation lives in the HouseCreate /
# HouseUpdate models; this layer scopes everything to the caller's
# household and handles archive/restore.
# =============================================================================

import logging
from fractions import Fraction
from uuid import UUID

from lib.scoring import round_half_up
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from core.models import (
    House,
    HouseCreate,
    HouseholdUser,
    HouseUpdate,
    RatingProgress,
)
from core.services.category_service import CategoryService
from app.exceptions import HouseNotFoundError

logger = logging.getLogger(__name__)


class HouseService:
    """Service for the household's candidate houses."""

    @staticmethod
    def create_house(member: HouseholdUser, data: HouseCreate) -> House:
        """Add a house to the member's household."""
        row = SupabaseClient.insert_row(
            "houses",
            {
                **data.model_dump(mode="json"),
                "household_id": member.household_id,
                "is_active": True,
            },
        )
        house = House(**row)
        logger.info(f"Created house {house.id} in household {member.household_id}")
        return house

    @staticmethod
    def list_houses(member: HouseholdUser, archived: bool = False) -> list[House]:
        """Active (or archived) houses, newest first."""
        rows = SupabaseClient.fetch_rows(
            "houses",
            filters={"household_id": member.household_id, "is_active": not archived},
            order_by="created_at",
            desc=True,
        )
        return [House(**row) for row in rows]

    @staticmethod
    def get_house(member: HouseholdUser, house_id: UUID | str) -> House:
        """
        Get a house of the member's household.

        Raises:
            HouseNotFoundError: Unknown ID or another household's house
        """
        row = SupabaseClient.fetch_row(
            "houses",
            filters={"id": house_id, "household_id": member.household_id},
        )
        if not row:
            raise HouseNotFoundError(str(house_id))
        return House(**row)

    @staticmethod
    def update_house(
        member: HouseholdUser,
        house_id: UUID | str,
        data: HouseUpdate,
    ) -> House:
        """
        Apply a partial update.

        Only the fields present in the request are written.
        """
        house = HouseService.get_house(member, house_id)
        changes = data.model_dump(mode="json", exclude_unset=True)
        if not changes:
            return house

        updated = SupabaseClient.update_rows(
            "houses",
            {**changes, "updated_at": utc_now_iso()},
            filters={"id": house.id},
        )
        if not updated:
            raise HouseNotFoundError(str(house_id))

        logger.info(f"Updated house {house.id}: {sorted(changes)}")
        return House(**updated[0])

    @staticmethod
    def _set_active(member: HouseholdUser, house_id: UUID | str, is_active: bool) -> House:
        house = HouseService.get_house(member, house_id)
        if house.is_active == is_active:
            return house

        updated = SupabaseClient.update_rows(
            "houses",
            {"is_active": is_active, "updated_at": utc_now_iso()},
            filters={"id": house.id},
        )
        if not updated:
            raise HouseNotFoundError(str(house_id))
        return House(**updated[0])

    @staticmethod
    def archive_house(member: HouseholdUser, house_id: UUID | str) -> House:
        """Hide a house from the active list. Ratings are kept."""
        house = HouseService._set_active(member, house_id, False)
        logger.info(f"Archived house {house.id}")
        return house

    @staticmethod
    def restore_house(member: HouseholdUser, house_id: UUID | str) -> House:
        """Bring an archived house back to the active list."""
        house = HouseService._set_active(member, house_id, True)
        logger.info(f"Restored house {house.id}")
        return house

    @staticmethod
    def delete_house(member: HouseholdUser, house_id: UUID | str) -> House:
        """Permanently delete a house and (via cascade) its ratings."""
        house = HouseService.get_house(member, house_id)
        SupabaseClient.delete_rows("houses", filters={"id": house.id})
        logger.info(f"Deleted house {house.id}")
        return house

    @staticmethod
    def rating_progress(member: HouseholdUser, house_id: UUID | str) -> RatingProgress:
        """
        How many active categories the member has rated for a house.

        Only non-null ratings on currently active categories count.
        """
        house = HouseService.get_house(member, house_id)
        active_ids = {
            str(c.id) for c in CategoryService.list_categories(member, active_only=True)
        }
        rows = SupabaseClient.fetch_rows(
            "house_ratings",
            filters={"house_id": house.id, "household_user_id": member.id},
            columns="category_id, rating",
        )
        rated = sum(
            1
            for row in rows
            if row.get("rating") is not None and str(row["category_id"]) in active_ids
        )
        total = len(active_ids)
        percentage = round_half_up(Fraction(rated * 100, total)) if total else 0

        return RatingProgress(rated=rated, total=total, percentage=percentage)
