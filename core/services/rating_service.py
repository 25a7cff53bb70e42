# =============================================================================
# core/services/rating_service.py - House Ratings
# =============================================================================
# A member rates each active category of a house 0-5 and can attach notes.
# One row per (member, house, category). The rating and the notes are saved
# independently: clearing a rating keeps its notes, and saving notes keeps
# the rating.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from core.models import CategoryWithRating, HouseholdUser, HouseRating
from core.services.category_service import CategoryService
from core.services.house_service import HouseService

logger = logging.getLogger(__name__)

RATING_CONFLICT_KEY = "household_user_id,house_id,category_id"


class RatingService:
    """Service for a member's ratings of a house."""

    @staticmethod
    def get_rating_rows(
        household_user_id: UUID | str,
        house_id: UUID | str,
    ) -> dict[str, dict[str, Any]]:
        """category_id -> rating row for one member and house."""
        rows = SupabaseClient.fetch_rows(
            "house_ratings",
            filters={"household_user_id": household_user_id, "house_id": house_id},
        )
        return {str(row["category_id"]): row for row in rows}

    @staticmethod
    def list_ratings(member: HouseholdUser, house_id: UUID | str) -> list[CategoryWithRating]:
        """Active categories merged with the member's rating and notes."""
        house = HouseService.get_house(member, house_id)
        categories = CategoryService.list_categories(member, active_only=True)
        rows = RatingService.get_rating_rows(member.id, house.id)

        result = []
        for category in categories:
            row = rows.get(str(category.id), {})
            result.append(
                CategoryWithRating(
                    category_id=category.id,
                    name=category.name,
                    category_group=category.category_group,
                    rating=row.get("rating"),
                    notes=row.get("notes"),
                    rating_id=row.get("id"),
                )
            )
        return result

    @staticmethod
    def _save(
        member: HouseholdUser,
        house_id: UUID | str,
        category_id: UUID | str,
        **changes: Any,
    ) -> HouseRating:
        house = HouseService.get_house(member, house_id)
        category = CategoryService.get_category(member, category_id)

        existing = SupabaseClient.fetch_row(
            "house_ratings",
            filters={
                "household_user_id": member.id,
                "house_id": house.id,
                "category_id": category.id,
            },
        ) or {}

        row = SupabaseClient.upsert_row(
            "house_ratings",
            {
                "household_user_id": member.id,
                "house_id": house.id,
                "category_id": category.id,
                "rating": existing.get("rating"),
                "notes": existing.get("notes"),
                **changes,
                "updated_at": utc_now_iso(),
            },
            on_conflict=RATING_CONFLICT_KEY,
        )
        return HouseRating(**row)

    @staticmethod
    def set_rating(
        member: HouseholdUser,
        house_id: UUID | str,
        category_id: UUID | str,
        rating: int | None,
    ) -> HouseRating:
        """
        Save (or, with None, clear) a rating. Notes are preserved.

        Raises:
            HouseNotFoundError / CategoryNotFoundError: Outside the household
        """
        saved = RatingService._save(member, house_id, category_id, rating=rating)
        logger.debug(f"Rating {category_id}={rating} on house {house_id} by {member.id}")
        return saved

    @staticmethod
    def set_notes(
        member: HouseholdUser,
        house_id: UUID | str,
        category_id: UUID | str,
        notes: str | None,
    ) -> HouseRating:
        """Save notes for a category. The rating, if any, is preserved."""
        notes = (notes or "").strip() or None
        return RatingService._save(member, house_id, category_id, notes=notes)
