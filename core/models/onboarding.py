# =============================================================================
# core/models/onboarding.py - Onboarding Schemas
# =============================================================================
# Per-member onboarding progress: which guided steps and tours are done,
# and whether the welcome modal has been dismissed. Stored one row per
# household user in the onboarding_states table.
# =============================================================================

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

ONBOARDING_STATE_VERSION = 1


class OnboardingStep(str, Enum):
    """Checklist steps, in the order they are presented."""
    HOUSEHOLD_MEMBERS = "household-members"
    CATEGORIES_REVIEW = "categories-review"
    PRIORITIES_INTRO = "priorities-intro"
    ADD_FIRST_HOUSE = "add-first-house"
    RATE_HOUSE = "rate-house"


class TourName(str, Enum):
    """Guided tours that can be completed or skipped."""
    WELCOME = "welcome"
    DASHBOARD = "dashboard"
    CATEGORIES = "categories"
    PRIORITIES = "priorities"
    HOUSES = "houses"
    RATING = "rating"


class OnboardingState(BaseModel):
    """
    Stored onboarding progress for one household user.

    Defaults describe a brand-new user: first login, nothing completed.
    """

    household_user_id: UUID
    has_completed_onboarding: bool = False
    is_first_login: bool = True
    completed_steps: list[OnboardingStep] = Field(default_factory=list)
    completed_tours: list[TourName] = Field(default_factory=list)
    skipped_tours: list[TourName] = Field(default_factory=list)
    version: int = ONBOARDING_STATE_VERSION

    @property
    def should_show_welcome(self) -> bool:
        return self.is_first_login and not self.has_completed_onboarding

    def is_step_completed(self, step: OnboardingStep) -> bool:
        return step in self.completed_steps


class ChecklistItem(BaseModel):
    """One line of the getting-started checklist."""

    id: str
    step: OnboardingStep
    label: str
    href: str
    is_completed: bool = False


class OnboardingChecklist(BaseModel):
    """The getting-started checklist as rendered on the dashboard."""

    items: list[ChecklistItem] = Field(default_factory=list)
    completed_count: int = 0
    total: int = 0
    all_complete: bool = False

    # False once onboarding is complete; the checklist is then hidden
    visible: bool = True

    @property
    def progress_percent(self) -> float:
        return (self.completed_count / self.total) * 100 if self.total else 0.0


class StepRequest(BaseModel):
    step: OnboardingStep


class TourRequest(BaseModel):
    tour: TourName
