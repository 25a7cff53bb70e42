# =============================================================================
# tests/test_category_service.py - Category Service Tests
# =============================================================================
# This module contains tests for:
# - Listing order and counters
# - Custom categories
# - Activate / deactivate / toggle
# - Hard delete with ratings still referencing the category
# =============================================================================

from uuid import uuid4

import pytest

from app.exceptions import CategoryNotFoundError, ValidationFailedError
from core.models import CategoryGroup, HouseCreate
from core.services.category_service import CategoryService
from core.services.house_service import HouseService
from core.services.rating_service import RatingService
from core.services.score_service import ScoreService
from core.services.weight_service import WeightService


def find_category(owner, name):
    return next(c for c in CategoryService.list_categories(owner) if c.name == name)


class TestListCategories:
    """Test listing categories."""

    def test_ordered_by_group_then_name(self, owner):
        categories = CategoryService.list_categories(owner)
        keys = [(c.category_group.value, c.name) for c in categories]

        assert keys == sorted(keys)

    def test_counters(self, owner):
        CategoryService.create_category(owner, "Mountain view")
        result = CategoryService.get_category_list(owner)

        assert result.total == 35
        assert result.active_count == 35
        assert result.custom_count == 1

    def test_active_only(self, owner):
        kitchen = find_category(owner, "Updated kitchen")
        CategoryService.set_active(owner, kitchen.id, False)

        active = CategoryService.list_categories(owner, active_only=True)

        assert len(active) == 33
        assert kitchen.id not in {c.id for c in active}

    def test_other_household_not_visible(self, owner):
        with pytest.raises(CategoryNotFoundError):
            CategoryService.get_category(owner, uuid4())


class TestCreateCategory:
    """Test adding custom categories."""

    def test_create_custom(self, owner):
        category = CategoryService.create_category(
            owner, "  Home gym ", CategoryGroup.SIZE, "Room for a rack"
        )

        assert category.name == "Home gym"
        assert category.is_default is False
        assert category.is_active is True
        assert category.category_group == CategoryGroup.SIZE

    def test_blank_name_rejected(self, owner):
        with pytest.raises(ValidationFailedError):
            CategoryService.create_category(owner, "   ")


class TestToggleCategory:
    """Test activate/deactivate."""

    def test_toggle_twice_restores(self, owner):
        fireplace = find_category(owner, "Fireplace")

        off = CategoryService.toggle_active(owner, fireplace.id)
        on = CategoryService.toggle_active(owner, fireplace.id)

        assert off.is_active is False
        assert on.is_active is True

    def test_set_same_state_is_noop(self, owner):
        fireplace = find_category(owner, "Fireplace")
        assert CategoryService.set_active(owner, fireplace.id, True).is_active is True


class TestDeleteCategory:
    """Test hard delete."""

    def test_delete_removes_category(self, fake_db, owner):
        garage = find_category(owner, "Garage")

        CategoryService.delete_category(owner, garage.id)

        assert garage.id not in {c.id for c in CategoryService.list_categories(owner)}

    def test_delete_with_ratings_keeps_scoring_working(self, fake_db, owner):
        """Orphaned weights and ratings drop out of the score."""
        kitchen = find_category(owner, "Updated kitchen")
        garage = find_category(owner, "Garage")
        house = HouseService.create_house(owner, HouseCreate(address="1 Elm St"))

        WeightService.set_weight(owner, kitchen.id, 5)
        WeightService.set_weight(owner, garage.id, 5)
        RatingService.set_rating(owner, house.id, kitchen.id, 5)
        RatingService.set_rating(owner, house.id, garage.id, 0)
        assert ScoreService.score_house(owner, house.id).overall_score == 50

        CategoryService.delete_category(owner, garage.id)

        # The store doesn't cascade here; the rating row is still present
        assert any(r["category_id"] == str(garage.id) for r in fake_db.rows("house_ratings"))
        score = ScoreService.score_house(owner, house.id)
        assert score.overall_score == 100
        assert score.total_count == 33

    def test_default_categories(self):
        defaults = CategoryService.default_categories()

        assert len(defaults) == 34
        assert defaults[0] == {"name": "Updated kitchen", "category_group": "features"}
