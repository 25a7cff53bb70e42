# =============================================================================
# app/routers/members.py - Household Member Endpoints
# =============================================================================
# List, invite, remove, and change roles of household members.
# Invite/remove/role changes are owner-only; the service enforces it.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status
from pydantic import BaseModel

from app.dependencies import CurrentMember
from core.models import HouseholdUser, InvitationResult, MemberInvite, RoleUpdate
from core.services.household_service import HouseholdService
from core.services.member_service import MemberService

router = APIRouter()


class InviteResponse(BaseModel):
    """The pending member plus what happened to the invitation email."""
    member: HouseholdUser
    email: InvitationResult
    message: str


class RemoveResponse(BaseModel):
    member_id: UUID
    message: str = "Member removed"


@router.get("", response_model=list[HouseholdUser])
def list_members(member: CurrentMember):
    """All household members, oldest first. Pending invitees included."""
    return HouseholdService.list_members(member)


@router.post("", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
def invite_member(request: MemberInvite, member: CurrentMember):
    """
    Invite someone to the household.

    The invitation stands even if the email could not be sent; check
    email.success in the response.
    """
    invited, email = MemberService.invite_member(
        member,
        name=request.name,
        email=request.email,
        role=request.role,
    )
    message = (
        f"Invitation sent to {invited.email}"
        if email.success
        else f"{invited.name} was added, but the invitation email could not be sent"
    )
    return InviteResponse(member=invited, email=email, message=message)


@router.delete("/{member_id}", response_model=RemoveResponse)
def remove_member(
    member_id: Annotated[UUID, Path(description="Household user UUID")],
    member: CurrentMember,
):
    """Remove a member. Owners only; you can't remove yourself."""
    removed = MemberService.remove_member(member, member_id)
    return RemoveResponse(member_id=removed.id)


@router.patch("/{member_id}/role", response_model=HouseholdUser)
def change_role(
    member_id: Annotated[UUID, Path(description="Household user UUID")],
    request: RoleUpdate,
    member: CurrentMember,
):
    """Promote to owner or demote to member. Owners only."""
    return MemberService.change_role(member, member_id, request.role)
