# =============================================================================
# tests/test_onboarding.py - Onboarding Service Tests
# =============================================================================
# This module contains tests for:
# - Default state and persisted progress
# - Steps and tours (idempotent)
# - Welcome modal, completion, reset
# - Getting-started checklist
# =============================================================================

from core.models import OnboardingStep, TourName
from core.services.onboarding_service import OnboardingService


class TestOnboardingState:
    """Test stored onboarding progress."""

    def test_default_state_not_stored(self, fake_db, owner):
        state = OnboardingService.get_state(owner)

        assert state.household_user_id == owner.id
        assert state.should_show_welcome is True
        assert fake_db.rows("onboarding_states") == []

    def test_complete_step_once(self, fake_db, owner):
        OnboardingService.complete_step(owner, OnboardingStep.ADD_FIRST_HOUSE)
        state = OnboardingService.complete_step(owner, OnboardingStep.ADD_FIRST_HOUSE)

        assert state.completed_steps == [OnboardingStep.ADD_FIRST_HOUSE]
        assert len(fake_db.rows("onboarding_states")) == 1

    def test_tours(self, owner):
        OnboardingService.complete_tour(owner, TourName.DASHBOARD)
        state = OnboardingService.skip_tour(owner, TourName.RATING)

        assert state.completed_tours == [TourName.DASHBOARD]
        assert state.skipped_tours == [TourName.RATING]

    def test_dismiss_welcome(self, owner):
        state = OnboardingService.dismiss_welcome(owner)

        assert state.is_first_login is False
        assert state.has_completed_onboarding is False
        assert state.should_show_welcome is False

    def test_reset(self, owner):
        OnboardingService.complete_step(owner, OnboardingStep.RATE_HOUSE)
        OnboardingService.complete_onboarding(owner)

        state = OnboardingService.reset(owner)

        assert state.completed_steps == []
        assert state.should_show_welcome is True

    def test_state_per_member(self, owner, add_member):
        jane = add_member("Jane", "jane@example.com")
        OnboardingService.complete_onboarding(owner)

        assert OnboardingService.get_state(jane).has_completed_onboarding is False


class TestChecklist:
    """Test the getting-started checklist."""

    def test_items(self, owner):
        checklist = OnboardingService.get_checklist(owner)

        assert [i.label for i in checklist.items] == [
            "Set up your household",
            "Customize categories",
            "Set your priorities",
            "Add first house",
            "Rate a house",
        ]
        assert checklist.items[2].href == "/dashboard/weights"
        assert checklist.completed_count == 0
        assert checklist.visible is True

    def test_progress(self, owner):
        OnboardingService.complete_step(owner, OnboardingStep.HOUSEHOLD_MEMBERS)
        OnboardingService.complete_step(owner, OnboardingStep.CATEGORIES_REVIEW)

        checklist = OnboardingService.get_checklist(owner)

        assert checklist.completed_count == 2
        assert checklist.progress_percent == 40.0
        assert checklist.all_complete is False

    def test_dismiss_incomplete_checklist_changes_nothing(self, owner):
        checklist = OnboardingService.dismiss_checklist(owner)

        assert checklist.visible is True
        assert OnboardingService.get_state(owner).has_completed_onboarding is False

    def test_dismiss_complete_checklist_completes_onboarding(self, owner):
        for step in OnboardingStep:
            OnboardingService.complete_step(owner, step)

        checklist = OnboardingService.dismiss_checklist(owner)

        assert checklist.all_complete is True
        assert checklist.visible is False
        assert OnboardingService.get_state(owner).has_completed_onboarding is True
