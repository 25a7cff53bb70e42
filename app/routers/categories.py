# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================
# Manage the household's rating categories. Open to every member.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from app.dependencies import CurrentMember
from core.models import (
    Category,
    CategoryActiveUpdate,
    CategoryAverage,
    CategoryCreate,
    CategoryList,
)
from core.services.category_service import CategoryService
from core.services.score_service import ScoreService

router = APIRouter()

CategoryId = Annotated[UUID, Path(description="Category UUID")]


@router.get("", response_model=CategoryList)
def list_categories(
    member: CurrentMember,
    active_only: Annotated[bool, Query(description="Only active categories")] = False,
):
    """Categories ordered by group then name, with counters."""
    if active_only:
        categories = CategoryService.list_categories(member, active_only=True)
        return CategoryList(
            categories=categories,
            total=len(categories),
            active_count=len(categories),
            custom_count=sum(1 for c in categories if not c.is_default),
        )
    return CategoryService.get_category_list(member)


@router.get("/defaults")
def default_categories():
    """The default category set new households start with."""
    return {"categories": CategoryService.default_categories()}


@router.get("/averages", response_model=list[CategoryAverage])
def category_averages(member: CurrentMember):
    """Mean weight per active category across the household."""
    return ScoreService.category_averages(member)


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(request: CategoryCreate, member: CurrentMember):
    """Add a custom category."""
    return CategoryService.create_category(
        member,
        name=request.name,
        category_group=request.category_group,
        description=request.description,
    )


@router.patch("/{category_id}", response_model=Category)
def set_category_active(
    category_id: CategoryId,
    request: CategoryActiveUpdate,
    member: CurrentMember,
):
    """Activate or deactivate a category."""
    return CategoryService.set_active(member, category_id, request.is_active)


@router.post("/{category_id}/toggle", response_model=Category)
def toggle_category(category_id: CategoryId, member: CurrentMember):
    """Flip a category between active and inactive."""
    return CategoryService.toggle_active(member, category_id)


@router.delete("/{category_id}")
def delete_category(category_id: CategoryId, member: CurrentMember):
    """
    Permanently delete a category.

    Ratings that referenced it no longer count toward any score.
    """
    deleted = CategoryService.delete_category(member, category_id)
    return {"category_id": str(deleted.id), "message": "Category deleted"}
