# =============================================================================
# core/models/score.py - Match Score Schemas
# =============================================================================
# Output of the scoring aggregator (lib/scoring.py):
# - CategoryScore: one category's rating as a 0-100 percentage
# - HouseScore: a member's overall weighted match for one house
# - HouseholdHouseScore: every member's HouseScore plus the household mean
#
# overall_score is None when nothing is scorable yet. Clients must render
# that as "Not rated", never as 0%.
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, Field

from .category import CategoryGroup


class CategoryScore(BaseModel):
    """
    Score for a single category.

    percent is rating / 5 * 100, or None when the category is unrated
    (regardless of weight).
    """

    category_id: UUID
    category_name: str
    category_group: CategoryGroup
    rating: int | None = None
    weight: int | None = None
    percent: float | None = Field(default=None, ge=0, le=100)

    @property
    def counts_toward_overall(self) -> bool:
        return self.rating is not None and bool(self.weight)


class HouseScore(BaseModel):
    """
    A member's weighted match score for one house.

    Example:
        {
            "house_id": "9b2d...",
            "overall_score": 78,
            "label": "Great Match",
            "rated_count": 12,
            "total_count": 34,
            "category_scores": [...]
        }
    """

    house_id: UUID
    household_user_id: UUID | None = None
    overall_score: int | None = Field(default=None, ge=0, le=100)
    label: str = "Not rated"

    # Categories that contributed to overall_score (weight > 0 and rated)
    rated_count: int = Field(default=0, ge=0)

    # Active categories considered
    total_count: int = Field(default=0, ge=0)

    category_scores: list[CategoryScore] = Field(default_factory=list)

    @property
    def is_scorable(self) -> bool:
        return self.overall_score is not None

    def grouped(self) -> dict[CategoryGroup, list[CategoryScore]]:
        """Category scores grouped by category group, preserving order."""
        groups: dict[CategoryGroup, list[CategoryScore]] = {}
        for score in self.category_scores:
            groups.setdefault(score.category_group, []).append(score)
        return groups


class MemberHouseScore(BaseModel):
    """One member's score inside a household comparison."""

    household_user_id: UUID
    name: str
    overall_score: int | None = None
    label: str = "Not rated"
    rated_count: int = 0


class HouseholdHouseScore(BaseModel):
    """All members' scores for a house and their rounded mean."""

    house_id: UUID
    household_average: int | None = None
    label: str = "Not rated"
    members: list[MemberHouseScore] = Field(default_factory=list)


class CategoryAverage(BaseModel):
    """Mean weight for a category across members who set one."""

    category_id: UUID
    category_name: str
    category_group: CategoryGroup
    average_weight: float | None = None
    user_count: int = 0
