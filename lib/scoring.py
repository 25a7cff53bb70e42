# =============================================================================
# lib/scoring.py - Match Score Aggregator
# =============================================================================
# Turns one member's category weights and house ratings into:
#   - a 0-100 percentage per category (rating / 5 * 100)
#   - an overall weighted match percentage for the house
#
#     overall = round( sum(weight * rating) / sum(weight * 5) * 100 )
#
# Only categories with BOTH a weight > 0 AND a rating contribute to the
# overall score. If none contribute, the overall score is None ("not
# scorable yet"), which is different from a real score of 0.
#
# Everything here is pure: no database access, safe to call per request.
# =============================================================================

import logging
import math
from fractions import Fraction
from typing import Iterable, Mapping
from uuid import UUID

from core.models import MAX_RATING, Category, CategoryScore, HouseScore

logger = logging.getLogger(__name__)

NOT_RATED_LABEL = "Not rated"

# (minimum score, label), checked top to bottom
SCORE_LABELS: list[tuple[int, str]] = [
    (90, "Excellent Match"),
    (75, "Great Match"),
    (60, "Good Match"),
    (45, "Fair Match"),
]
LOWEST_SCORE_LABEL = "Needs Work"


def round_half_up(value: Fraction | int | float) -> int:
    """
    Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding (round(62.5) == 62); match
    scores round .5 up, so 62.5 -> 63.
    """
    return math.floor(Fraction(value) + Fraction(1, 2))


def category_percent(rating: int | None) -> float | None:
    """
    Percentage for a single rating: 0 -> 0.0, 3 -> 60.0, 5 -> 100.0.

    Returns None for an unrated category.
    """
    if rating is None:
        return None
    # Multiply before dividing so every 0-5 rating maps to an exact value
    return rating * 100 / MAX_RATING


def score_label(score: int | None) -> str:
    """Human label for an overall score ("Not rated" when None)."""
    if score is None:
        return NOT_RATED_LABEL
    for minimum, label in SCORE_LABELS:
        if score >= minimum:
            return label
    return LOWEST_SCORE_LABEL


def _by_category(values: Mapping[str | UUID, int | None] | None) -> dict[str, int | None]:
    return {str(key): value for key, value in (values or {}).items()}


def score_house(
    house_id: str | UUID,
    categories: Iterable[Category],
    weights: Mapping[str | UUID, int | None] | None,
    ratings: Mapping[str | UUID, int | None] | None,
    household_user_id: str | UUID | None = None,
) -> HouseScore:
    """
    Compute one member's match score for one house.

    Args:
        house_id: House being scored
        categories: The household's active categories, in display order
        weights: category_id -> weight (0-5); missing/None means unset
        ratings: category_id -> rating (0-5) for this house; missing/None
            means unrated
        household_user_id: Member the weights and ratings belong to

    Returns:
        HouseScore with a breakdown entry for every category. Ratings for
        categories not in `categories` (deleted or deactivated) are ignored.

    Example:
        >>> score = score_house(house_id, cats, {"a": 5, "b": 0}, {"a": 5, "b": 0})
        >>> score.overall_score
        100
    """
    weight_map = _by_category(weights)
    rating_map = _by_category(ratings)

    category_scores: list[CategoryScore] = []
    weighted_sum = 0
    weighted_max = 0
    rated_count = 0

    for category in categories:
        key = str(category.id)
        weight = weight_map.get(key)
        rating = rating_map.get(key)

        score = CategoryScore(
            category_id=category.id,
            category_name=category.name,
            category_group=category.category_group,
            rating=rating,
            weight=weight,
            percent=category_percent(rating),
        )
        category_scores.append(score)

        if score.counts_toward_overall:
            weighted_sum += weight * rating
            weighted_max += weight * MAX_RATING
            rated_count += 1

    overall_score = None
    if weighted_max > 0:
        overall_score = round_half_up(Fraction(weighted_sum * 100, weighted_max))

    return HouseScore(
        house_id=house_id,
        household_user_id=household_user_id,
        overall_score=overall_score,
        label=score_label(overall_score),
        rated_count=rated_count,
        total_count=len(category_scores),
        category_scores=category_scores,
    )


def average_score(scores: Iterable[int | None]) -> int | None:
    """
    Rounded mean of the scorable values, ignoring None.

    Returns None when no value is scorable.
    """
    values = [score for score in scores if score is not None]
    if not values:
        return None
    return round_half_up(Fraction(sum(values), len(values)))
