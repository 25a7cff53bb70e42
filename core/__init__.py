# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the household/house-rating business logic:
# - models/: Pydantic schemas for data validation
# - services/: Household, member, category, weight, house, rating,
#   score, invitation and onboarding services
#
# Routers call services; services talk to Supabase through lib/.
# =============================================================================
