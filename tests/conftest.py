# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - FakeSupabase: an in-memory stand-in for lib.supabase_client.SupabaseClient
#   patched into every service module
# - A seeded household (owner + default categories) and API test client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.pop("RESEND_API_KEY", None)

from contextlib import ExitStack
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable
from unittest.mock import patch
from uuid import UUID, uuid4

import pytest


# Every module that does `from lib.supabase_client import SupabaseClient`
SUPABASE_PATCH_TARGETS = [
    "core.services.household_service.SupabaseClient",
    "core.services.member_service.SupabaseClient",
    "core.services.category_service.SupabaseClient",
    "core.services.weight_service.SupabaseClient",
    "core.services.house_service.SupabaseClient",
    "core.services.rating_service.SupabaseClient",
    "core.services.score_service.SupabaseClient",
    "core.services.onboarding_service.SupabaseClient",
    "app.routers.health.SupabaseClient",
]

OWNER_AUTH_ID = UUID("11111111-1111-4111-8111-111111111111")
OWNER_EMAIL = "john@example.com"


# =============================================================================
# In-memory store
# =============================================================================

def _norm(value: Any) -> Any:
    return str(value) if isinstance(value, UUID) else value


def _same(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    return str(a) == str(b)


class FakeSupabase:
    """
    In-memory tables behind the SupabaseClient class method API.

    Mirrors the PostgREST behaviour the services rely on:
    - a None filter value matches NULL
    - fetch_row returns None unless exactly one row matches
    - upsert merges into the row with the same conflict key
    - inserts get an id and increasing created_at timestamps
    No cascades: deleting a row leaves rows that reference it.
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self._clock = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def rows(self, table: str) -> list[dict[str, Any]]:
        """Direct access for assertions."""
        return self.tables.setdefault(table, [])

    def _tick(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def _matches(
        self,
        row: dict[str, Any],
        filters: dict[str, Any] | None,
        in_filters: dict[str, Iterable[Any]] | None = None,
    ) -> bool:
        for column, value in (filters or {}).items():
            if not _same(row.get(column), _norm(value)):
                return False
        for column, values in (in_filters or {}).items():
            if str(row.get(column)) not in {str(v) for v in values}:
                return False
        return True

    def _select(self, table, filters=None, in_filters=None):
        return [r for r in self.rows(table) if self._matches(r, filters, in_filters)]

    def _new_row(self, data: dict[str, Any]) -> dict[str, Any]:
        now = self._tick()
        row = {"id": str(uuid4()), "created_at": now, "updated_at": now}
        row.update({k: _norm(v) for k, v in data.items()})
        return row

    # -------------------------------------------------------------------------
    # SupabaseClient API
    # -------------------------------------------------------------------------

    def get_client(self):
        return self

    def fetch_row(self, table, filters, columns="*"):
        found = self._select(table, filters)
        return dict(found[0]) if len(found) == 1 else None

    def fetch_rows(self, table, filters=None, in_filters=None, columns="*", order_by=None, desc=False):
        found = [dict(r) for r in self._select(table, filters, in_filters)]
        if order_by:
            columns_ = [order_by] if isinstance(order_by, str) else list(order_by)
            found.sort(
                key=lambda r: tuple((r.get(c) is None, r.get(c) or "") for c in columns_),
                reverse=desc,
            )
        return found

    def count_rows(self, table, filters=None):
        return len(self._select(table, filters))

    def insert_rows(self, table, rows):
        inserted = [self._new_row(data) for data in rows]
        self.rows(table).extend(inserted)
        return [dict(r) for r in inserted]

    def insert_row(self, table, data):
        return self.insert_rows(table, [data])[0]

    def update_rows(self, table, data, filters):
        updated = []
        for row in self._select(table, filters):
            row.update({k: _norm(v) for k, v in data.items()})
            updated.append(dict(row))
        return updated

    def upsert_rows(self, table, rows, on_conflict):
        keys = [k.strip() for k in on_conflict.split(",")]
        stored = []
        for data in rows:
            existing = self._select(table, {k: data[k] for k in keys})
            if existing:
                existing[0].update({k: _norm(v) for k, v in data.items()})
                stored.append(dict(existing[0]))
            else:
                stored.extend(self.insert_rows(table, [data]))
        return stored

    def upsert_row(self, table, data, on_conflict):
        return self.upsert_rows(table, [data], on_conflict)[0]

    def delete_rows(self, table, filters):
        doomed = self._select(table, filters)
        self.tables[table] = [r for r in self.rows(table) if r not in doomed]
        return [dict(r) for r in doomed]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    """FakeSupabase patched in wherever SupabaseClient is used."""
    db = FakeSupabase()
    with ExitStack() as stack:
        for target in SUPABASE_PATCH_TARGETS:
            stack.enter_context(patch(target, db))
        yield db


@pytest.fixture
def household(fake_db):
    """A household created by John, with the default categories."""
    from core.services.household_service import HouseholdService

    return HouseholdService.create_household(
        auth_user_id=OWNER_AUTH_ID,
        email=OWNER_EMAIL,
        household_name="The Smith Family",
        user_name="John",
    )


@pytest.fixture
def owner(household):
    """The household's first owner."""
    return household[1]


@pytest.fixture
def add_member(fake_db, household):
    """Factory that inserts a signed-up member directly into the store."""
    from core.models import HouseholdUser

    def _add(name: str, email: str, role: str = "member") -> HouseholdUser:
        row = fake_db.insert_row(
            "household_users",
            {
                "household_id": household[0].id,
                "auth_user_id": uuid4(),
                "name": name,
                "email": email,
                "role": role,
            },
        )
        return HouseholdUser(**row)

    return _add


@pytest.fixture
def sample_house_data():
    """Request body for a typical house."""
    return {
        "address": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip": "62701",
        "price": 425000,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "square_feet": 1850,
        "year_built": 1998,
        "listing_url": "https://www.example.com/listing/123",
    }


@pytest.fixture
def api_user():
    """Identity the API client is signed in as."""
    from app.auth import AuthUser

    return AuthUser(id=OWNER_AUTH_ID, email=OWNER_EMAIL)


@pytest.fixture
def client(fake_db, api_user):
    """TestClient signed in as api_user, backed by fake_db."""
    from fastapi.testclient import TestClient

    from app.auth import get_current_user
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: api_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
