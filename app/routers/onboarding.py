# =============================================================================
# app/routers/onboarding.py - Onboarding Endpoints
# =============================================================================
# The caller's onboarding progress and the getting-started checklist.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import CurrentMember
from core.models import OnboardingChecklist, OnboardingState, StepRequest, TourRequest
from core.services.onboarding_service import OnboardingService

router = APIRouter()


@router.get("", response_model=OnboardingState)
def get_onboarding(member: CurrentMember):
    return OnboardingService.get_state(member)


@router.post("/steps", response_model=OnboardingState)
def complete_step(request: StepRequest, member: CurrentMember):
    return OnboardingService.complete_step(member, request.step)


@router.post("/tours/complete", response_model=OnboardingState)
def complete_tour(request: TourRequest, member: CurrentMember):
    return OnboardingService.complete_tour(member, request.tour)


@router.post("/tours/skip", response_model=OnboardingState)
def skip_tour(request: TourRequest, member: CurrentMember):
    return OnboardingService.skip_tour(member, request.tour)


@router.post("/welcome/dismiss", response_model=OnboardingState)
def dismiss_welcome(member: CurrentMember):
    """Hide the welcome modal without finishing onboarding."""
    return OnboardingService.dismiss_welcome(member)


@router.post("/complete", response_model=OnboardingState)
def complete_onboarding(member: CurrentMember):
    return OnboardingService.complete_onboarding(member)


@router.post("/reset", response_model=OnboardingState)
def reset_onboarding(member: CurrentMember):
    """Start onboarding over; the welcome modal shows again."""
    return OnboardingService.reset(member)


@router.get("/checklist", response_model=OnboardingChecklist)
def get_checklist(member: CurrentMember):
    return OnboardingService.get_checklist(member)


@router.post("/checklist/dismiss", response_model=OnboardingChecklist)
def dismiss_checklist(member: CurrentMember):
    """Dismiss the checklist; completes onboarding once every item is done."""
    return OnboardingService.dismiss_checklist(member)
