# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Verifies Supabase Auth JWTs. Sign-up and login happen client-side against
# Supabase; the API only checks the access token.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import decode_token, get_current_user
from app.auth.models import AuthUser, UserResponse

__all__ = [
    "decode_token",
    "get_current_user",
    "AuthUser",
    "UserResponse",
]
