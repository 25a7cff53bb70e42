# =============================================================================
# core/services/category_service.py - Category Management
# =============================================================================
# Any household member can add, toggle, or delete categories. Deleting is a
# hard delete; weights and ratings that still reference the category are
# left in place and simply drop out of scoring.
# =============================================================================

import logging
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from core.models import (
    DEFAULT_CATEGORIES,
    Category,
    CategoryGroup,
    CategoryList,
    HouseholdUser,
)
from app.exceptions import CategoryNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for the household's rating categories."""

    @staticmethod
    def list_categories(member: HouseholdUser, active_only: bool = False) -> list[Category]:
        """
        Categories of the member's household, ordered by group then name.

        Args:
            member: Calling household user
            active_only: Skip deactivated categories
        """
        filters = {"household_id": member.household_id}
        if active_only:
            filters["is_active"] = True

        rows = SupabaseClient.fetch_rows(
            "categories",
            filters=filters,
            order_by=["category_group", "name"],
        )
        return [Category(**row) for row in rows]

    @staticmethod
    def get_category_list(member: HouseholdUser) -> CategoryList:
        """All categories plus counters for the categories page."""
        categories = CategoryService.list_categories(member)
        return CategoryList(
            categories=categories,
            total=len(categories),
            active_count=sum(1 for c in categories if c.is_active),
            custom_count=sum(1 for c in categories if not c.is_default),
        )

    @staticmethod
    def get_category(member: HouseholdUser, category_id: UUID | str) -> Category:
        """
        Get one category of the member's household.

        Raises:
            CategoryNotFoundError: Unknown ID or another household's category
        """
        row = SupabaseClient.fetch_row(
            "categories",
            filters={"id": category_id, "household_id": member.household_id},
        )
        if not row:
            raise CategoryNotFoundError(str(category_id))
        return Category(**row)

    @staticmethod
    def create_category(
        member: HouseholdUser,
        name: str,
        category_group: CategoryGroup = CategoryGroup.FEATURES,
        description: str | None = None,
    ) -> Category:
        """
        Add a custom category. New categories start active.

        Raises:
            ValidationFailedError: Blank name
        """
        name = (name or "").strip()
        if not name:
            raise ValidationFailedError("Category name is required", field="name")

        row = SupabaseClient.insert_row(
            "categories",
            {
                "household_id": member.household_id,
                "name": name,
                "description": (description or "").strip() or None,
                "category_group": category_group.value,
                "is_default": False,
                "is_active": True,
            },
        )
        category = Category(**row)
        logger.info(f"Created category {category.id} in household {member.household_id}")
        return category

    @staticmethod
    def set_active(
        member: HouseholdUser,
        category_id: UUID | str,
        is_active: bool,
    ) -> Category:
        """Activate or deactivate a category."""
        category = CategoryService.get_category(member, category_id)
        if category.is_active == is_active:
            return category

        updated = SupabaseClient.update_rows(
            "categories",
            {"is_active": is_active, "updated_at": utc_now_iso()},
            filters={"id": category.id},
        )
        if not updated:
            raise CategoryNotFoundError(str(category_id))

        logger.info(f"Category {category.id} is_active={is_active}")
        return Category(**updated[0])

    @staticmethod
    def toggle_active(member: HouseholdUser, category_id: UUID | str) -> Category:
        category = CategoryService.get_category(member, category_id)
        return CategoryService.set_active(member, category.id, not category.is_active)

    @staticmethod
    def delete_category(member: HouseholdUser, category_id: UUID | str) -> Category:
        """
        Permanently delete a category.

        Existing weights and ratings are not touched here; the database
        cascades them, and if it doesn't, scoring ignores ratings whose
        category is gone.
        """
        category = CategoryService.get_category(member, category_id)
        SupabaseClient.delete_rows("categories", filters={"id": category.id})

        logger.info(f"Deleted category {category.id} from household {member.household_id}")
        return category

    @staticmethod
    def default_categories() -> list[dict[str, str]]:
        """The default (name, group) set every household starts with."""
        return [
            {"name": name, "category_group": group.value}
            for name, group in DEFAULT_CATEGORIES
        ]
