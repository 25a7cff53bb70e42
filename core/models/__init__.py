# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - household.py: Household, HouseholdUser, roles and size limits
# - category.py: Rating categories, groups, and the default set
# - house.py: Candidate houses and their validation rules
# - rating.py: Category weights and house ratings (0-5)
# - score.py: Match score output of the scoring aggregator
# - onboarding.py: Onboarding state and getting-started checklist
# - invitation.py: Invitation email request/result
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Household Models
# -----------------------------------------------------------------------------
from .household import (
    EMAIL_PATTERN,
    MAX_OWNERS,
    MAX_USERS,
    MIN_USERS,
    Household,
    HouseholdCreate,
    HouseholdSummary,
    HouseholdUpdate,
    HouseholdUser,
    MemberInvite,
    RoleUpdate,
    UserRole,
)

# -----------------------------------------------------------------------------
# Category Models
# -----------------------------------------------------------------------------
from .category import (
    CATEGORY_GROUP_LABELS,
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_COUNT,
    Category,
    CategoryActiveUpdate,
    CategoryCreate,
    CategoryGroup,
    CategoryList,
)

# -----------------------------------------------------------------------------
# House Models
# -----------------------------------------------------------------------------
from .house import (
    House,
    HouseCreate,
    HouseUpdate,
    RatingProgress,
)

# -----------------------------------------------------------------------------
# Weight & Rating Models
# -----------------------------------------------------------------------------
from .rating import (
    MAX_RATING,
    RATING_LABELS,
    WEIGHT_LABELS,
    CategoryWeight,
    CategoryWithRating,
    CategoryWithWeight,
    GroupProgress,
    HouseRating,
    NotesUpdate,
    RatingUpdate,
    WeightBulkUpdate,
    WeightItem,
    WeightProgress,
    WeightUpdate,
    weight_label,
)

# -----------------------------------------------------------------------------
# Score Models
# -----------------------------------------------------------------------------
from .score import (
    CategoryAverage,
    CategoryScore,
    HouseholdHouseScore,
    HouseScore,
    MemberHouseScore,
)

# -----------------------------------------------------------------------------
# Onboarding Models
# -----------------------------------------------------------------------------
from .onboarding import (
    ONBOARDING_STATE_VERSION,
    ChecklistItem,
    OnboardingChecklist,
    OnboardingState,
    OnboardingStep,
    StepRequest,
    TourName,
    TourRequest,
)

# -----------------------------------------------------------------------------
# Invitation Models
# -----------------------------------------------------------------------------
from .invitation import (
    InvitationEmail,
    InvitationRequest,
    InvitationResult,
)

__all__ = [
    # Household
    "EMAIL_PATTERN",
    "MAX_OWNERS",
    "MAX_USERS",
    "MIN_USERS",
    "Household",
    "HouseholdCreate",
    "HouseholdSummary",
    "HouseholdUpdate",
    "HouseholdUser",
    "MemberInvite",
    "RoleUpdate",
    "UserRole",
    # Category
    "CATEGORY_GROUP_LABELS",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY_COUNT",
    "Category",
    "CategoryActiveUpdate",
    "CategoryCreate",
    "CategoryGroup",
    "CategoryList",
    # House
    "House",
    "HouseCreate",
    "HouseUpdate",
    "RatingProgress",
    # Weight & Rating
    "MAX_RATING",
    "RATING_LABELS",
    "WEIGHT_LABELS",
    "CategoryWeight",
    "CategoryWithRating",
    "CategoryWithWeight",
    "GroupProgress",
    "HouseRating",
    "NotesUpdate",
    "RatingUpdate",
    "WeightBulkUpdate",
    "WeightItem",
    "WeightProgress",
    "WeightUpdate",
    "weight_label",
    # Score
    "CategoryAverage",
    "CategoryScore",
    "HouseholdHouseScore",
    "HouseScore",
    "MemberHouseScore",
    # Onboarding
    "ONBOARDING_STATE_VERSION",
    "ChecklistItem",
    "OnboardingChecklist",
    "OnboardingState",
    "OnboardingStep",
    "StepRequest",
    "TourName",
    "TourRequest",
    # Invitation
    "InvitationEmail",
    "InvitationRequest",
    "InvitationResult",
]
