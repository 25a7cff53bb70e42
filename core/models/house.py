# =============================================================================
# core/models/house.py - House Schemas
# =============================================================================
# A house is one candidate property the household is considering.
# Houses are never hard-deleted from the UI: "archiving" flips is_active
# and restoring flips it back, leaving all ratings untouched.
# =============================================================================

from datetime import date, datetime
from urllib.parse import urlparse
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

MIN_YEAR_BUILT = 1800
MAX_BEDROOMS = 20
MAX_BATHROOMS = 10


class House(BaseModel):
    """A house row from the houses table."""

    id: UUID
    household_id: UUID
    nickname: str | None = None
    address: str
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    price: float | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_feet: int | None = None
    lot_size_sqft: int | None = None
    year_built: int | None = None
    property_type: str | None = None
    listing_url: str | None = None
    notes: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def display_location(self) -> str:
        """'City, ST, 12345' with missing parts skipped."""
        return ", ".join(part for part in (self.city, self.state, self.zip) if part)


class HouseFields(BaseModel):
    """
    Editable house fields and their validation rules.

    Shared by HouseCreate and HouseUpdate:
    - price, square_feet, lot_size_sqft must be >= 0
    - bedrooms 0-20, bathrooms 0-10
    - year_built between 1800 and the current year
    - listing_url must be an absolute http(s) URL
    """

    nickname: str | None = Field(default=None, max_length=100)
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    price: float | None = Field(default=None, ge=0)
    bedrooms: int | None = Field(default=None, ge=0, le=MAX_BEDROOMS)
    bathrooms: float | None = Field(default=None, ge=0, le=MAX_BATHROOMS)
    square_feet: int | None = Field(default=None, ge=0)
    lot_size_sqft: int | None = Field(default=None, ge=0)
    year_built: int | None = None
    property_type: str | None = None
    listing_url: str | None = None
    notes: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("year_built")
    @classmethod
    def check_year_built(cls, value: int | None) -> int | None:
        if value is None:
            return value
        current_year = date.today().year
        if value < MIN_YEAR_BUILT or value > current_year:
            raise ValueError(f"Year built must be between {MIN_YEAR_BUILT} and {current_year}")
        return value

    @field_validator("listing_url")
    @classmethod
    def check_listing_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if not value:
            return None
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Listing URL must be a valid URL")
        return value

    @field_validator("nickname", "city", "state", "zip", "property_type", "notes")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        return value or None


class HouseCreate(HouseFields):
    """
    Request body for adding a house.

    Example:
        {
            "address": "123 Main St",
            "city": "Springfield",
            "state": "IL",
            "price": 425000,
            "bedrooms": 3,
            "bathrooms": 2.5
        }
    """

    address: str = Field(..., max_length=255)

    @field_validator("address")
    @classmethod
    def require_address(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Address is required")
        return value


class HouseUpdate(HouseFields):
    """
    Partial update of a house.

    Only fields present in the request body are written; send null to
    clear an optional field. The address can be changed but not cleared.
    """

    address: str | None = Field(default=None, max_length=255)

    @field_validator("address")
    @classmethod
    def require_address(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError("Address is required")
        return value.strip()


class RatingProgress(BaseModel):
    """How many active categories the current member has rated for a house."""

    rated: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.rated >= self.total
