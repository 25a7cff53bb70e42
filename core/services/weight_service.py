# =============================================================================
# core/services/weight_service.py - Category Weights
# =============================================================================
# Each member sets their own 0-5 importance for every active category.
# Weights are personal: one member's weights never affect another's
# scores. Writes are upserts so repeated saves are idempotent.
# =============================================================================

import logging
from typing import Iterable
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import percent, utc_now_iso
from core.models import (
    CategoryGroup,
    CategoryWeight,
    CategoryWithWeight,
    GroupProgress,
    HouseholdUser,
    WeightItem,
    WeightProgress,
    weight_label,
)
from core.services.category_service import CategoryService

logger = logging.getLogger(__name__)

WEIGHT_CONFLICT_KEY = "household_user_id,category_id"


class WeightService:
    """Service for reading and saving a member's category weights."""

    @staticmethod
    def get_weight_map(household_user_id: UUID | str) -> dict[str, int]:
        """category_id -> weight for one household user."""
        rows = SupabaseClient.fetch_rows(
            "category_weights",
            filters={"household_user_id": household_user_id},
            columns="category_id, weight",
        )
        return {str(row["category_id"]): row["weight"] for row in rows}

    @staticmethod
    def list_weights(member: HouseholdUser) -> list[CategoryWithWeight]:
        """Active categories, each with the member's weight or None."""
        categories = CategoryService.list_categories(member, active_only=True)
        weights = WeightService.get_weight_map(member.id)

        result = []
        for category in categories:
            weight = weights.get(str(category.id))
            result.append(
                CategoryWithWeight(
                    category_id=category.id,
                    name=category.name,
                    category_group=category.category_group,
                    description=category.description,
                    weight=weight,
                    label=weight_label(weight),
                )
            )
        return result

    @staticmethod
    def set_weight(
        member: HouseholdUser,
        category_id: UUID | str,
        weight: int,
    ) -> CategoryWeight:
        """
        Save one weight.

        Raises:
            CategoryNotFoundError: Category not in the member's household
        """
        category = CategoryService.get_category(member, category_id)
        row = SupabaseClient.upsert_row(
            "category_weights",
            {
                "household_user_id": member.id,
                "category_id": category.id,
                "weight": weight,
                "updated_at": utc_now_iso(),
            },
            on_conflict=WEIGHT_CONFLICT_KEY,
        )
        logger.debug(f"Weight {category.id}={weight} for member {member.id}")
        return CategoryWeight(**row)

    @staticmethod
    def set_weights(
        member: HouseholdUser,
        items: Iterable[WeightItem],
    ) -> list[CategoryWeight]:
        """
        Save several weights in one upsert.

        Items for categories outside the household are rejected before
        anything is written.

        Raises:
            CategoryNotFoundError: Any category not in the member's household
        """
        items = list(items)
        known = {str(c.id) for c in CategoryService.list_categories(member)}
        for item in items:
            if str(item.category_id) not in known:
                # Raises CategoryNotFoundError
                CategoryService.get_category(member, item.category_id)

        # Last value wins when a category appears twice
        latest = {str(item.category_id): item.weight for item in items}
        now = utc_now_iso()
        rows = SupabaseClient.upsert_rows(
            "category_weights",
            [
                {
                    "household_user_id": member.id,
                    "category_id": category_id,
                    "weight": weight,
                    "updated_at": now,
                }
                for category_id, weight in latest.items()
            ],
            on_conflict=WEIGHT_CONFLICT_KEY,
        )
        logger.info(f"Saved {len(rows)} weights for member {member.id}")
        return [CategoryWeight(**row) for row in rows]

    @staticmethod
    def weight_progress(member: HouseholdUser) -> WeightProgress:
        """
        How many active categories the member has weighted.

        average_weight is the mean of the weights that are set.
        """
        weights = WeightService.list_weights(member)
        set_weights = [w.weight for w in weights if w.weight is not None]

        groups: dict[CategoryGroup, GroupProgress] = {}
        for item in weights:
            group = groups.setdefault(
                item.category_group,
                GroupProgress(category_group=item.category_group),
            )
            group.total += 1
            if item.weight is not None:
                group.rated += 1
        for group in groups.values():
            group.percentage = percent(group.rated, group.total)

        return WeightProgress(
            rated=len(set_weights),
            total=len(weights),
            average_weight=sum(set_weights) / len(set_weights) if set_weights else 0.0,
            percentage=percent(len(set_weights), len(weights)),
            groups=list(groups.values()),
        )
