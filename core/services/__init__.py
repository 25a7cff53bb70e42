# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .household_service import HouseholdService
from .member_service import MemberService
from .category_service import CategoryService
from .weight_service import WeightService
from .house_service import HouseService
from .rating_service import RatingService
from .score_service import ScoreService
from .invitation_service import InvitationService
from .onboarding_service import OnboardingService

__all__ = [
    "HouseholdService",
    "MemberService",
    "CategoryService",
    "WeightService",
    "HouseService",
    "RatingService",
    "ScoreService",
    "InvitationService",
    "OnboardingService",
]
