# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, for updated_at columns."""
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# String Utilities
# =============================================================================

def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for storage and comparison."""
    return email.strip().lower()


def percent(part: int, whole: int) -> float:
    """part / whole * 100, or 0.0 when whole is 0."""
    return (part / whole) * 100 if whole else 0.0
