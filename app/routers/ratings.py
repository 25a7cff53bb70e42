# =============================================================================
# app/routers/ratings.py - House Rating Endpoints
# =============================================================================
# The caller's 0-5 rating and notes per category of a house.
# Mounted under /houses/{house_id}/ratings.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import CurrentMember
from core.models import CategoryWithRating, HouseRating, NotesUpdate, RatingUpdate
from core.services.rating_service import RatingService

router = APIRouter()

HouseId = Annotated[UUID, Path(description="House UUID")]
CategoryId = Annotated[UUID, Path(description="Category UUID")]


@router.get("/{house_id}/ratings", response_model=list[CategoryWithRating])
def list_ratings(house_id: HouseId, member: CurrentMember):
    """Active categories with the caller's rating and notes."""
    return RatingService.list_ratings(member, house_id)


@router.put("/{house_id}/ratings/{category_id}", response_model=HouseRating)
def set_rating(
    house_id: HouseId,
    category_id: CategoryId,
    request: RatingUpdate,
    member: CurrentMember,
):
    """Save a rating, or clear it with {"rating": null}. Notes are kept."""
    return RatingService.set_rating(member, house_id, category_id, request.rating)


@router.put("/{house_id}/ratings/{category_id}/notes", response_model=HouseRating)
def set_notes(
    house_id: HouseId,
    category_id: CategoryId,
    request: NotesUpdate,
    member: CurrentMember,
):
    """Save notes for a category. The rating is kept."""
    return RatingService.set_notes(member, house_id, category_id, request.notes)
