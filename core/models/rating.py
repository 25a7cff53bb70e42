# =============================================================================
# core/models/rating.py - Weight & Rating Schemas
# =============================================================================
# Two kinds of 0-5 values drive scoring:
# - CategoryWeight: how much a member cares about a category (personal,
#   independent across household members)
# - HouseRating: how well a house satisfies a category, per member
#
# A missing weight/rating (null) is NOT the same as 0. Null means "not
# answered yet" and is left out of scoring; 0 is a real answer.
# =============================================================================

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from .category import CategoryGroup

MIN_RATING = 0
MAX_RATING = 5

RATING_LABELS: dict[int, str] = {
    0: "Not rated",
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}

WEIGHT_LABELS: dict[int, str] = {
    0: "No, thank you!",
    1: "I dont need this",
    2: "I am neutral",
    3: "This would be nice",
    4: "I really want this",
    5: "This is absolutely necessary!",
}

UNSET_WEIGHT_LABEL = "Please rate this feature!"


def weight_label(weight: int | None) -> str:
    """Label shown next to a weight slider."""
    if weight is None:
        return UNSET_WEIGHT_LABEL
    return WEIGHT_LABELS.get(weight, WEIGHT_LABELS[3])


# =============================================================================
# Weights
# =============================================================================

class CategoryWeight(BaseModel):
    """A row from the category_weights table."""

    id: UUID | None = None
    household_user_id: UUID
    category_id: UUID
    weight: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WeightUpdate(BaseModel):
    """Request body for setting one weight."""

    weight: int = Field(..., ge=MIN_RATING, le=MAX_RATING)


class WeightItem(BaseModel):
    """One entry of a bulk weight update."""

    category_id: UUID
    weight: int = Field(..., ge=MIN_RATING, le=MAX_RATING)


class WeightBulkUpdate(BaseModel):
    """Request body for saving several weights at once."""

    weights: list[WeightItem] = Field(..., min_length=1)


class CategoryWithWeight(BaseModel):
    """An active category merged with the member's weight (null if unset)."""

    category_id: UUID
    name: str
    category_group: CategoryGroup
    description: str | None = None
    weight: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    label: str = UNSET_WEIGHT_LABEL


class GroupProgress(BaseModel):
    """Answered/total counts for one category group."""

    category_group: CategoryGroup
    rated: int = 0
    total: int = 0
    percentage: float = 0.0


class WeightProgress(BaseModel):
    """Overall weight completion for a member."""

    rated: int = 0
    total: int = 0
    average_weight: float = 0.0
    percentage: float = 0.0
    groups: list[GroupProgress] = Field(default_factory=list)


# =============================================================================
# Ratings
# =============================================================================

class HouseRating(BaseModel):
    """
    A row from the house_ratings table.

    rating may be null when the member has only written notes.
    """

    id: UUID | None = None
    house_id: UUID
    household_user_id: UUID
    category_id: UUID
    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RatingUpdate(BaseModel):
    """Request body for setting (or clearing, with null) a rating."""

    rating: int | None = Field(..., ge=MIN_RATING, le=MAX_RATING)


class NotesUpdate(BaseModel):
    """Request body for saving notes on a category rating."""

    notes: str | None = Field(default=None, max_length=2000)


class CategoryWithRating(BaseModel):
    """An active category merged with the member's rating for one house."""

    category_id: UUID
    name: str
    category_group: CategoryGroup
    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    notes: str | None = None
    rating_id: UUID | None = None
