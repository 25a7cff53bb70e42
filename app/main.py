# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the HouseRater API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    HouseRaterException,
    houserater_exception_handler,
    supabase_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    categories,
    health,
    households,
    houses,
    invitations,
    members,
    onboarding,
    ratings,
    weights,
)
from app.auth import routes as auth_routes
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The API holds no background resources; startup only reports config.
    """
    logger.info(f"Starting HouseRater API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.email_enabled:
        logger.info("RESEND_API_KEY not set: invitation emails will be logged, not sent")

    yield

    logger.info("Shutting down HouseRater API")


# Create FastAPI application
app = FastAPI(
    title="HouseRater API",
    description="""
## Collaborative House Rating API

HouseRater helps a household (2-8 people) compare the houses they're
considering.

### How It Works

1. **Create a Household** - The creator becomes its first owner
2. **Invite Members** - Owners invite up to 8 people in total
3. **Set Priorities** - Each member weights every category 0-5
4. **Add Houses** - Address plus optional listing details
5. **Rate Houses** - Each member rates every category 0-5
6. **Compare** - Weighted match scores per member and for the household

### Match Score

```
overall = round( sum(weight * rating) / sum(weight * 5) * 100 )
```

Only categories with a weight above 0 and a rating count. A house with no
such category is "Not rated" (`overall_score: null`), never 0%.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Verify Supabase tokens and resolve the household",
        },
        {
            "name": "Households",
            "description": "Create and manage the household",
        },
        {
            "name": "Members",
            "description": "Invite and manage household members",
        },
        {
            "name": "Categories",
            "description": "Rating categories",
        },
        {
            "name": "Weights",
            "description": "Your personal category priorities",
        },
        {
            "name": "Houses",
            "description": "Candidate houses and match scores",
        },
        {
            "name": "Ratings",
            "description": "Your ratings of a house",
        },
        {
            "name": "Invitations",
            "description": "Invitation emails",
        },
        {
            "name": "Onboarding",
            "description": "Onboarding progress and checklist",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(HouseRaterException)
async def handle_houserater_exception(request: Request, exc: HouseRaterException):
    """Handle custom HouseRater exceptions."""
    return await houserater_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_exception(request: Request, exc: SupabaseClientError):
    """Handle database failures."""
    logger.error(f"Supabase error on {request.url.path}: {exc}")
    return await supabase_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request body/parameter validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints (router carries its own /auth prefix)
app.include_router(
    auth_routes.router,
    prefix="/api/v1",
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Household endpoints
app.include_router(
    households.router,
    prefix="/api/v1/households",
    tags=["Households"]
)

# Member endpoints
app.include_router(
    members.router,
    prefix="/api/v1/members",
    tags=["Members"]
)

# Category endpoints
app.include_router(
    categories.router,
    prefix="/api/v1/categories",
    tags=["Categories"]
)

# Weight endpoints
app.include_router(
    weights.router,
    prefix="/api/v1/weights",
    tags=["Weights"]
)

# House endpoints
app.include_router(
    houses.router,
    prefix="/api/v1/houses",
    tags=["Houses"]
)

# Rating endpoints (nested under houses)
app.include_router(
    ratings.router,
    prefix="/api/v1/houses",
    tags=["Ratings"]
)

# Invitation email endpoint
app.include_router(
    invitations.router,
    prefix="/api/v1",
    tags=["Invitations"]
)

# Onboarding endpoints
app.include_router(
    onboarding.router,
    prefix="/api/v1/onboarding",
    tags=["Onboarding"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "HouseRater API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
