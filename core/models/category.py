# =============================================================================
# core/models/category.py - Rating Category Schemas
# =============================================================================
# A category is one rateable attribute of a house ("Updated kitchen",
# "Commute time", ...). Every household gets the default set on creation
# and may add custom ones, toggle them on/off, or delete them.
# =============================================================================

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class CategoryGroup(str, Enum):
    """Groups used to organize categories in the UI and in score breakdowns."""
    FEATURES = "features"
    SIZE = "size"
    NEIGHBORHOOD = "neighborhood"
    TRANSPORTATION = "transportation"
    YARD = "yard"
    CUSTOM = "custom"


CATEGORY_GROUP_LABELS: dict[CategoryGroup, str] = {
    CategoryGroup.FEATURES: "Features",
    CategoryGroup.SIZE: "Size & Space",
    CategoryGroup.NEIGHBORHOOD: "Neighborhood",
    CategoryGroup.TRANSPORTATION: "Transportation",
    CategoryGroup.YARD: "Yard & Outdoor",
    CategoryGroup.CUSTOM: "Custom",
}


# (name, group) pairs seeded for every new household, in display order
DEFAULT_CATEGORIES: list[tuple[str, CategoryGroup]] = [
    # Features
    ("Updated kitchen", CategoryGroup.FEATURES),
    ("Updated bathrooms", CategoryGroup.FEATURES),
    ("Natural light", CategoryGroup.FEATURES),
    ("Hardwood floors", CategoryGroup.FEATURES),
    ("Central air conditioning", CategoryGroup.FEATURES),
    ("Fireplace", CategoryGroup.FEATURES),
    ("In-unit laundry", CategoryGroup.FEATURES),
    ("Open floor plan", CategoryGroup.FEATURES),
    ("Energy efficiency", CategoryGroup.FEATURES),
    # Size
    ("Number of bedrooms", CategoryGroup.SIZE),
    ("Number of bathrooms", CategoryGroup.SIZE),
    ("Total square footage", CategoryGroup.SIZE),
    ("Storage space", CategoryGroup.SIZE),
    ("Home office space", CategoryGroup.SIZE),
    ("Basement", CategoryGroup.SIZE),
    ("Garage", CategoryGroup.SIZE),
    # Neighborhood
    ("School district", CategoryGroup.NEIGHBORHOOD),
    ("Safety", CategoryGroup.NEIGHBORHOOD),
    ("Walkability", CategoryGroup.NEIGHBORHOOD),
    ("Proximity to shopping", CategoryGroup.NEIGHBORHOOD),
    ("Proximity to restaurants", CategoryGroup.NEIGHBORHOOD),
    ("Parks nearby", CategoryGroup.NEIGHBORHOOD),
    ("Noise level", CategoryGroup.NEIGHBORHOOD),
    # Transportation
    ("Commute time", CategoryGroup.TRANSPORTATION),
    ("Public transit access", CategoryGroup.TRANSPORTATION),
    ("Highway access", CategoryGroup.TRANSPORTATION),
    ("Parking", CategoryGroup.TRANSPORTATION),
    ("Bike friendliness", CategoryGroup.TRANSPORTATION),
    # Yard
    ("Yard size", CategoryGroup.YARD),
    ("Privacy", CategoryGroup.YARD),
    ("Patio or deck", CategoryGroup.YARD),
    ("Garden space", CategoryGroup.YARD),
    ("Fenced yard", CategoryGroup.YARD),
    ("Landscaping", CategoryGroup.YARD),
]

DEFAULT_CATEGORY_COUNT = len(DEFAULT_CATEGORIES)


class Category(BaseModel):
    """A category row from the categories table."""

    id: UUID
    household_id: UUID
    name: str
    description: str | None = None
    category_group: CategoryGroup = CategoryGroup.CUSTOM
    is_default: bool = False
    display_order: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategoryCreate(BaseModel):
    """
    Request body for adding a custom category.

    Example:
        {"name": "Mountain view", "category_group": "features"}
    """

    name: str = Field(..., min_length=1, max_length=100)
    category_group: CategoryGroup = Field(default=CategoryGroup.FEATURES)
    description: str | None = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category name is required")
        return value


class CategoryActiveUpdate(BaseModel):
    """Request body for activating/deactivating a category."""

    is_active: bool


class CategoryList(BaseModel):
    """Categories plus the counters shown on the categories page."""

    categories: list[Category] = Field(default_factory=list)
    total: int = 0
    active_count: int = 0
    custom_count: int = 0
