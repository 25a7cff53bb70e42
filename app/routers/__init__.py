# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - households.py: Household setup and details
# - members.py: Invite/remove members and change roles
# - categories.py: Rating category management
# - weights.py: Per-member category weights
# - houses.py: Candidate houses, scores, archive/restore
# - ratings.py: Per-member house ratings and notes
# - invitations.py: Public send-invitation email endpoint
# - onboarding.py: Onboarding state and checklist
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import households
from . import members
from . import categories
from . import weights
from . import houses
from . import ratings
from . import invitations
from . import onboarding

__all__ = [
    "health",
    "households",
    "members",
    "categories",
    "weights",
    "houses",
    "ratings",
    "invitations",
    "onboarding",
]
