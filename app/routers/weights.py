# =============================================================================
# app/routers/weights.py - Category Weight Endpoints
# =============================================================================
# The caller's own 0-5 importance per category. Every write is an upsert,
# so clients can safely retry or debounce saves.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import CurrentMember
from core.models import (
    CategoryWeight,
    CategoryWithWeight,
    WeightBulkUpdate,
    WeightProgress,
    WeightUpdate,
)
from core.services.weight_service import WeightService

router = APIRouter()


@router.get("", response_model=list[CategoryWithWeight])
def list_weights(member: CurrentMember):
    """Active categories with the caller's weight (null if unset)."""
    return WeightService.list_weights(member)


@router.get("/progress", response_model=WeightProgress)
def weight_progress(member: CurrentMember):
    return WeightService.weight_progress(member)


@router.put("", response_model=list[CategoryWeight])
def set_weights(request: WeightBulkUpdate, member: CurrentMember):
    """Save several weights at once."""
    return WeightService.set_weights(member, request.weights)


@router.put("/{category_id}", response_model=CategoryWeight)
def set_weight(
    category_id: Annotated[UUID, Path(description="Category UUID")],
    request: WeightUpdate,
    member: CurrentMember,
):
    """Save one weight."""
    return WeightService.set_weight(member, category_id, request.weight)
