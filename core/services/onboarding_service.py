# =============================================================================
# core/services/onboarding_service.py - Onboarding Progress
# =============================================================================
# Stores each member's onboarding state (completed steps/tours, welcome
# modal flag) and builds the getting-started checklist.
#
# A member with no stored row gets the default state; the row is created
# on the first write. Completing a step or tour twice is a no-op.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from core.models import (
    ONBOARDING_STATE_VERSION,
    ChecklistItem,
    HouseholdUser,
    OnboardingChecklist,
    OnboardingState,
    OnboardingStep,
    TourName,
)

logger = logging.getLogger(__name__)

ONBOARDING_CONFLICT_KEY = "household_user_id"

# (id, step, label, href) in display order
CHECKLIST_ITEMS: list[tuple[str, OnboardingStep, str, str]] = [
    ("household", OnboardingStep.HOUSEHOLD_MEMBERS, "Set up your household", "/dashboard/members"),
    ("categories", OnboardingStep.CATEGORIES_REVIEW, "Customize categories", "/dashboard/categories"),
    ("priorities", OnboardingStep.PRIORITIES_INTRO, "Set your priorities", "/dashboard/weights"),
    ("house", OnboardingStep.ADD_FIRST_HOUSE, "Add first house", "/dashboard/houses"),
    ("rate", OnboardingStep.RATE_HOUSE, "Rate a house", "/dashboard/houses"),
]


class OnboardingService:
    """Service for per-member onboarding state."""

    @staticmethod
    def get_state(member: HouseholdUser) -> OnboardingState:
        """Stored state, or the default state for a new member."""
        row = SupabaseClient.fetch_row(
            "onboarding_states", filters={"household_user_id": member.id}
        )
        if not row:
            return OnboardingState(household_user_id=member.id)

        state = OnboardingState(**row)
        if state.version < ONBOARDING_STATE_VERSION:
            state.version = ONBOARDING_STATE_VERSION
        return state

    @staticmethod
    def save_state(state: OnboardingState) -> OnboardingState:
        row = SupabaseClient.upsert_row(
            "onboarding_states",
            {**state.model_dump(mode="json"), "updated_at": utc_now_iso()},
            on_conflict=ONBOARDING_CONFLICT_KEY,
        )
        return OnboardingState(**row)

    @staticmethod
    def complete_step(member: HouseholdUser, step: OnboardingStep) -> OnboardingState:
        state = OnboardingService.get_state(member)
        if step in state.completed_steps:
            return state
        state.completed_steps.append(step)
        logger.info(f"Member {member.id} completed onboarding step {step.value}")
        return OnboardingService.save_state(state)

    @staticmethod
    def complete_tour(member: HouseholdUser, tour: TourName) -> OnboardingState:
        state = OnboardingService.get_state(member)
        if tour in state.completed_tours:
            return state
        state.completed_tours.append(tour)
        return OnboardingService.save_state(state)

    @staticmethod
    def skip_tour(member: HouseholdUser, tour: TourName) -> OnboardingState:
        state = OnboardingService.get_state(member)
        if tour in state.skipped_tours:
            return state
        state.skipped_tours.append(tour)
        return OnboardingService.save_state(state)

    @staticmethod
    def dismiss_welcome(member: HouseholdUser) -> OnboardingState:
        """Hide the welcome modal without completing onboarding."""
        state = OnboardingService.get_state(member)
        state.is_first_login = False
        return OnboardingService.save_state(state)

    @staticmethod
    def complete_onboarding(member: HouseholdUser) -> OnboardingState:
        state = OnboardingService.get_state(member)
        state.has_completed_onboarding = True
        state.is_first_login = False
        logger.info(f"Member {member.id} completed onboarding")
        return OnboardingService.save_state(state)

    @staticmethod
    def reset(member: HouseholdUser) -> OnboardingState:
        """Start over ("Take a tour" again): clears progress, shows welcome."""
        logger.info(f"Member {member.id} reset onboarding")
        return OnboardingService.save_state(OnboardingState(household_user_id=member.id))

    @staticmethod
    def build_checklist(state: OnboardingState) -> OnboardingChecklist:
        """Getting-started checklist for a state."""
        items = [
            ChecklistItem(
                id=item_id,
                step=step,
                label=label,
                href=href,
                is_completed=state.is_step_completed(step),
            )
            for item_id, step, label, href in CHECKLIST_ITEMS
        ]
        completed = sum(1 for item in items if item.is_completed)
        return OnboardingChecklist(
            items=items,
            completed_count=completed,
            total=len(items),
            all_complete=completed == len(items),
            visible=not state.has_completed_onboarding,
        )

    @staticmethod
    def get_checklist(member: HouseholdUser) -> OnboardingChecklist:
        return OnboardingService.build_checklist(OnboardingService.get_state(member))

    @staticmethod
    def dismiss_checklist(member: HouseholdUser) -> OnboardingChecklist:
        """
        Dismiss the checklist.

        Once every item is done, dismissing it completes onboarding and the
        checklist stays hidden. Otherwise nothing is stored.
        """
        state = OnboardingService.get_state(member)
        checklist = OnboardingService.build_checklist(state)
        if checklist.all_complete and not state.has_completed_onboarding:
            state = OnboardingService.complete_onboarding(member)
            checklist = OnboardingService.build_checklist(state)
        return checklist
