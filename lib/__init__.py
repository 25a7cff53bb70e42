# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - scoring.py: Match score aggregator (weights x ratings -> percentages)
# - email_client.py: Transactional email via Resend, logged in development
# - utils.py: Shared helpers (UUID/email normalization, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.scoring import (
    average_score,
    category_percent,
    round_half_up,
    score_house,
    score_label,
)
from lib.email_client import EmailClient, EmailSendError, SendResult
from lib.utils import normalize_email, percent, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Scoring
    "average_score",
    "category_percent",
    "round_half_up",
    "score_house",
    "score_label",
    # Email
    "EmailClient",
    "EmailSendError",
    "SendResult",
    # Utils
    "normalize_email",
    "percent",
    "utc_now_iso",
]
