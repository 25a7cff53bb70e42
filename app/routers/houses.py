# =============================================================================
# app/routers/houses.py - House Endpoints
# =============================================================================
# Candidate houses, their match scores, and archive/restore.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status
from pydantic import BaseModel

from app.dependencies import CurrentMember
from core.models import (
    House,
    HouseCreate,
    HouseholdHouseScore,
    HouseScore,
    HouseUpdate,
    RatingProgress,
)
from core.services.house_service import HouseService
from core.services.score_service import ScoreService

router = APIRouter()

HouseId = Annotated[UUID, Path(description="House UUID")]


class HouseWithScore(BaseModel):
    """A house in the list view, with the caller's match score."""
    house: House
    overall_score: int | None = None
    label: str = "Not rated"
    rated_count: int = 0


class HouseListResponse(BaseModel):
    houses: list[HouseWithScore]
    total: int


@router.get("", response_model=HouseListResponse)
def list_houses(
    member: CurrentMember,
    archived: Annotated[bool, Query(description="List archived houses instead")] = False,
):
    """
    List houses, newest first, each with the caller's match score.

    overall_score is null for houses that can't be scored yet.
    """
    houses = HouseService.list_houses(member, archived=archived)
    scores = ScoreService.score_houses(member, [h.id for h in houses])

    items = [
        HouseWithScore(
            house=house,
            overall_score=score.overall_score,
            label=score.label,
            rated_count=score.rated_count,
        )
        for house, score in zip(houses, scores)
    ]
    return HouseListResponse(houses=items, total=len(items))


@router.post("", response_model=House, status_code=status.HTTP_201_CREATED)
def create_house(request: HouseCreate, member: CurrentMember):
    """Add a house."""
    return HouseService.create_house(member, request)


@router.get("/{house_id}", response_model=House)
def get_house(house_id: HouseId, member: CurrentMember):
    return HouseService.get_house(member, house_id)


@router.patch("/{house_id}", response_model=House)
def update_house(house_id: HouseId, request: HouseUpdate, member: CurrentMember):
    """Update the fields present in the body."""
    return HouseService.update_house(member, house_id, request)


@router.delete("/{house_id}")
def delete_house(house_id: HouseId, member: CurrentMember):
    """Permanently delete a house. Prefer archiving."""
    deleted = HouseService.delete_house(member, house_id)
    return {"house_id": str(deleted.id), "message": "House deleted"}


@router.post("/{house_id}/archive", response_model=House)
def archive_house(house_id: HouseId, member: CurrentMember):
    """Move a house to the archive. Ratings are kept."""
    return HouseService.archive_house(member, house_id)


@router.post("/{house_id}/restore", response_model=House)
def restore_house(house_id: HouseId, member: CurrentMember):
    """Bring an archived house back."""
    return HouseService.restore_house(member, house_id)


@router.get("/{house_id}/score", response_model=HouseScore)
def get_house_score(house_id: HouseId, member: CurrentMember):
    """The caller's match score with a per-category breakdown."""
    return ScoreService.score_house(member, house_id)


@router.get("/{house_id}/scores", response_model=HouseholdHouseScore)
def get_household_scores(house_id: HouseId, member: CurrentMember):
    """Every member's score for the house and the household average."""
    return ScoreService.household_scores(member, house_id)


@router.get("/{house_id}/progress", response_model=RatingProgress)
def get_rating_progress(house_id: HouseId, member: CurrentMember):
    """How many active categories the caller has rated."""
    return HouseService.rating_progress(member, house_id)
