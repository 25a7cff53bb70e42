# =============================================================================
# tests/test_house_service.py - House Service Tests
# =============================================================================
# This module contains tests for:
# - Creating, listing and updating houses
# - Household scoping
# - Archive / restore
# - Rating progress
# =============================================================================

from uuid import uuid4

import pytest

from app.exceptions import HouseNotFoundError
from core.models import HouseCreate, HouseUpdate
from core.services.category_service import CategoryService
from core.services.house_service import HouseService
from core.services.household_service import HouseholdService
from core.services.rating_service import RatingService


@pytest.fixture
def house(owner, sample_house_data):
    return HouseService.create_house(owner, HouseCreate(**sample_house_data))


class TestCreateAndList:
    """Test adding and listing houses."""

    def test_create(self, owner, house):
        assert house.household_id == owner.household_id
        assert house.is_active is True
        assert house.display_location == "Springfield, IL, 62701"

    def test_newest_first(self, owner, house):
        newer = HouseService.create_house(owner, HouseCreate(address="9 Oak Ave"))

        houses = HouseService.list_houses(owner)

        assert [h.id for h in houses] == [newer.id, house.id]

    def test_other_household_hidden(self, fake_db, house):
        _, stranger = HouseholdService.create_household(
            auth_user_id=uuid4(),
            email="other@example.com",
            household_name="Others",
            user_name="Olga",
        )

        assert HouseService.list_houses(stranger) == []
        with pytest.raises(HouseNotFoundError):
            HouseService.get_house(stranger, house.id)


class TestUpdateHouse:
    """Test partial updates."""

    def test_only_sent_fields_change(self, owner, house):
        updated = HouseService.update_house(owner, house.id, HouseUpdate(price=399000))

        assert updated.price == 399000
        assert updated.address == "123 Main St"
        assert updated.bedrooms == 3

    def test_clear_optional_field(self, owner, house):
        updated = HouseService.update_house(owner, house.id, HouseUpdate(nickname=None))
        assert updated.nickname is None

    def test_empty_update_is_noop(self, owner, house):
        assert HouseService.update_house(owner, house.id, HouseUpdate()) == house


class TestArchiveRestore:
    """Test archive/restore round trip."""

    def test_round_trip_keeps_ratings(self, owner, house):
        kitchen = CategoryService.list_categories(owner)[0]
        RatingService.set_rating(owner, house.id, kitchen.id, 4)

        archived = HouseService.archive_house(owner, house.id)
        assert archived.is_active is False
        assert HouseService.list_houses(owner) == []
        assert [h.id for h in HouseService.list_houses(owner, archived=True)] == [house.id]

        restored = HouseService.restore_house(owner, house.id)
        assert restored.is_active is True
        assert [h.id for h in HouseService.list_houses(owner)] == [house.id]

        ratings = {r.category_id: r.rating for r in RatingService.list_ratings(owner, house.id)}
        assert ratings[kitchen.id] == 4

    def test_archive_is_idempotent(self, owner, house):
        HouseService.archive_house(owner, house.id)
        again = HouseService.archive_house(owner, house.id)

        assert again.is_active is False

    def test_delete(self, owner, house):
        HouseService.delete_house(owner, house.id)

        with pytest.raises(HouseNotFoundError):
            HouseService.get_house(owner, house.id)


class TestRatingProgress:
    """Test rated/total counts."""

    def test_empty(self, owner, house):
        progress = HouseService.rating_progress(owner, house.id)

        assert (progress.rated, progress.total, progress.percentage) == (0, 34, 0)

    def test_counts_only_active_non_null(self, owner, house):
        categories = CategoryService.list_categories(owner)
        RatingService.set_rating(owner, house.id, categories[0].id, 3)
        RatingService.set_rating(owner, house.id, categories[1].id, 0)
        RatingService.set_notes(owner, house.id, categories[2].id, "Check the roof")
        RatingService.set_rating(owner, house.id, categories[3].id, 5)
        CategoryService.set_active(owner, categories[3].id, False)

        progress = HouseService.rating_progress(owner, house.id)

        # 2 of 33: 6.06% -> 6
        assert (progress.rated, progress.total, progress.percentage) == (2, 33, 6)
