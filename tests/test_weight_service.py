# =============================================================================
# tests/test_weight_service.py - Weight Service Tests
# =============================================================================
# This module contains tests for:
# - Listing categories merged with weights
# - Single and bulk upserts
# - Progress counters
# =============================================================================

from uuid import uuid4

import pytest

from app.exceptions import CategoryNotFoundError
from core.models import CategoryGroup, WeightItem
from core.services.category_service import CategoryService
from core.services.weight_service import WeightService


@pytest.fixture
def kitchen(owner):
    return next(c for c in CategoryService.list_categories(owner) if c.name == "Updated kitchen")


class TestListWeights:
    """Test the merged weight list."""

    def test_unset_weights_are_none(self, owner):
        weights = WeightService.list_weights(owner)

        assert len(weights) == 34
        assert all(w.weight is None for w in weights)
        assert weights[0].label == "Please rate this feature!"

    def test_set_weight_is_listed(self, owner, kitchen):
        WeightService.set_weight(owner, kitchen.id, 4)

        item = next(w for w in WeightService.list_weights(owner) if w.category_id == kitchen.id)

        assert item.weight == 4
        assert item.label == "I really want this"

    def test_weights_are_personal(self, owner, kitchen, add_member):
        jane = add_member("Jane", "jane@example.com")
        WeightService.set_weight(owner, kitchen.id, 5)

        assert WeightService.get_weight_map(jane.id) == {}


class TestSetWeights:
    """Test upserts."""

    def test_set_twice_updates_single_row(self, fake_db, owner, kitchen):
        WeightService.set_weight(owner, kitchen.id, 2)
        WeightService.set_weight(owner, kitchen.id, 0)

        rows = fake_db.rows("category_weights")
        assert len(rows) == 1
        assert rows[0]["weight"] == 0

    def test_unknown_category_rejected(self, owner):
        with pytest.raises(CategoryNotFoundError):
            WeightService.set_weight(owner, uuid4(), 3)

    def test_bulk_set(self, owner):
        categories = CategoryService.list_categories(owner)[:3]
        items = [WeightItem(category_id=c.id, weight=i) for i, c in enumerate(categories)]

        saved = WeightService.set_weights(owner, items)

        assert len(saved) == 3
        assert WeightService.get_weight_map(owner.id) == {
            str(c.id): i for i, c in enumerate(categories)
        }

    def test_bulk_with_unknown_category_writes_nothing(self, fake_db, owner, kitchen):
        items = [
            WeightItem(category_id=kitchen.id, weight=5),
            WeightItem(category_id=uuid4(), weight=5),
        ]

        with pytest.raises(CategoryNotFoundError):
            WeightService.set_weights(owner, items)

        assert fake_db.rows("category_weights") == []


class TestWeightProgress:
    """Test progress counters."""

    def test_progress(self, owner):
        yard = [
            c for c in CategoryService.list_categories(owner)
            if c.category_group == CategoryGroup.YARD
        ]
        WeightService.set_weight(owner, yard[0].id, 5)
        WeightService.set_weight(owner, yard[1].id, 2)

        progress = WeightService.weight_progress(owner)

        assert progress.rated == 2
        assert progress.total == 34
        assert progress.average_weight == 3.5
        group = next(g for g in progress.groups if g.category_group == CategoryGroup.YARD)
        assert (group.rated, group.total) == (2, 6)
