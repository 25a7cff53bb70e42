# =============================================================================
# tests/test_scoring.py - Match Score Aggregator Tests
# =============================================================================
# This module contains tests for:
# - Per-category percentages
# - Overall weighted score and which categories count toward it
# - Rounding and score labels
#
# Pure functions: no database, no mocks.
# =============================================================================

from fractions import Fraction
from uuid import uuid4

import pytest

from core.models import Category, CategoryGroup
from lib.scoring import (
    average_score,
    category_percent,
    round_half_up,
    score_house,
    score_label,
)


HOUSEHOLD_ID = uuid4()
HOUSE_ID = uuid4()


def make_category(name: str, group: CategoryGroup = CategoryGroup.FEATURES) -> Category:
    return Category(id=uuid4(), household_id=HOUSEHOLD_ID, name=name, category_group=group)


@pytest.fixture
def categories():
    """Three active categories: kitchen, yard, commute."""
    return [
        make_category("Updated kitchen"),
        make_category("Yard size", CategoryGroup.YARD),
        make_category("Commute time", CategoryGroup.TRANSPORTATION),
    ]


# =============================================================================
# Category Percent Tests
# =============================================================================

class TestCategoryPercent:
    """Test rating -> percentage conversion."""

    @pytest.mark.parametrize("rating,expected", [
        (0, 0.0), (1, 20.0), (2, 40.0), (3, 60.0), (4, 80.0), (5, 100.0),
    ])
    def test_exact_percentages(self, rating, expected):
        """Every rating maps to an exact percentage."""
        assert category_percent(rating) == expected

    def test_unrated_has_no_percent(self):
        """None means unrated, not 0%."""
        assert category_percent(None) is None


# =============================================================================
# Overall Score Tests
# =============================================================================

class TestScoreHouse:
    """Test the weighted overall score."""

    def test_weight_zero_category_excluded(self, categories):
        """A rated category with weight 0 doesn't drag the score down."""
        a, b, _ = categories
        score = score_house(HOUSE_ID, [a, b], {a.id: 5, b.id: 0}, {a.id: 5, b.id: 0})

        assert score.overall_score == 100
        assert score.rated_count == 1

    def test_full_weight_zero_rating(self, categories):
        """A single weight-5 category rated 0 scores 0, not None."""
        a = categories[0]
        score = score_house(HOUSE_ID, [a], {a.id: 5}, {a.id: 0})

        assert score.overall_score == 0
        assert score.label == "Needs Work"

    def test_no_weights_is_not_rated(self, categories):
        """Rated but unweighted categories leave the house unscorable."""
        ratings = {c.id: 4 for c in categories}
        score = score_house(HOUSE_ID, categories, {}, ratings)

        assert score.overall_score is None
        assert score.label == "Not rated"
        assert score.is_scorable is False

    def test_weighted_but_unrated_excluded(self, categories):
        """Weighted categories without a rating are left out."""
        a, b, c = categories
        score = score_house(
            HOUSE_ID, categories, {a.id: 4, b.id: 5, c.id: 3}, {a.id: 3}
        )

        assert score.overall_score == 60
        assert score.rated_count == 1
        assert score.total_count == 3

        counted = [s.category_name for s in score.category_scores if s.counts_toward_overall]
        assert counted == ["Updated kitchen"]

    def test_weighted_average(self, categories):
        """(5*4 + 2*1) / (5*5 + 2*5) * 100 = 62.857 -> 63."""
        a, b, _ = categories
        score = score_house(HOUSE_ID, categories, {a.id: 5, b.id: 2}, {a.id: 4, b.id: 1})

        assert score.overall_score == 63
        assert score.label == "Good Match"

    def test_breakdown_covers_every_category(self, categories):
        """Unrated categories appear in the breakdown with no percent."""
        a, b, c = categories
        score = score_house(HOUSE_ID, categories, {a.id: 3}, {a.id: 5, b.id: 2})

        percents = {s.category_name: s.percent for s in score.category_scores}
        assert percents == {"Updated kitchen": 100.0, "Yard size": 40.0, "Commute time": None}

    def test_ratings_for_unknown_categories_ignored(self, categories):
        """Ratings left behind by a deleted category don't count."""
        a = categories[0]
        deleted_id = uuid4()
        score = score_house(
            HOUSE_ID, [a], {a.id: 5, deleted_id: 5}, {a.id: 5, deleted_id: 0}
        )

        assert score.overall_score == 100
        assert len(score.category_scores) == 1

    def test_string_and_uuid_keys_match(self, categories):
        """Weights keyed by str and ratings keyed by UUID line up."""
        a = categories[0]
        score = score_house(HOUSE_ID, [a], {str(a.id): 5}, {a.id: 4})

        assert score.overall_score == 80

    def test_grouped_breakdown(self, categories):
        score = score_house(HOUSE_ID, categories, {}, {})
        groups = score.grouped()

        assert list(groups) == [
            CategoryGroup.FEATURES, CategoryGroup.YARD, CategoryGroup.TRANSPORTATION,
        ]


# =============================================================================
# Rounding & Label Tests
# =============================================================================

class TestRounding:
    """Test round-half-up and labels."""

    def test_half_rounds_up(self):
        """62.5 -> 63, unlike round()'s banker's rounding."""
        assert round_half_up(Fraction(125, 2)) == 63
        assert round_half_up(Fraction(5, 2)) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(Fraction(6249, 100)) == 62

    @pytest.mark.parametrize("score,label", [
        (None, "Not rated"),
        (100, "Excellent Match"),
        (90, "Excellent Match"),
        (89, "Great Match"),
        (75, "Great Match"),
        (60, "Good Match"),
        (45, "Fair Match"),
        (44, "Needs Work"),
        (0, "Needs Work"),
    ])
    def test_score_labels(self, score, label):
        assert score_label(score) == label

    def test_average_ignores_unscorable(self):
        assert average_score([80, None, 65]) == 73
        assert average_score([None, None]) is None
