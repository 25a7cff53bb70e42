# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the HouseRater API:
# - test_scoring.py: Match score aggregator (pure functions)
# - test_models.py: Unit tests for Pydantic model validation
# - test_*_service.py: Services against the in-memory FakeSupabase
# - test_invitations.py: Email rendering, Resend client, send-invitation
# - test_auth.py / test_routes.py: HTTP layer via TestClient
#
# Run tests with: pytest
# =============================================================================
