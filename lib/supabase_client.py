# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes a small set of table operations used by the services:
# - Filtered selects (single row, many rows, exact counts)
# - Inserts, updates and deletes
# - Upserts keyed on a natural composite constraint
#
# Every failure is re-raised as SupabaseClientError so the API layer can
# render a consistent "backend unavailable" response.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   houses = SupabaseClient.fetch_rows("houses", filters={"household_id": hid})
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Active houses for a household, newest first
        houses = SupabaseClient.fetch_rows(
            "houses",
            filters={"household_id": household_id, "is_active": True},
            order_by="created_at",
            desc=True,
        )

        # Save a weight, replacing any previous value
        SupabaseClient.upsert_row(
            "category_weights",
            {"household_user_id": member_id, "category_id": cid, "weight": 4},
            on_conflict="household_user_id,category_id",
        )
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Household scoping is therefore enforced by the services, which
        always filter on the caller's household_id.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _normalize_uuid(cls, uuid_value: Any) -> Any:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    @classmethod
    def _normalize_data(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Convert any UUID values in a payload to strings."""
        return {key: cls._normalize_uuid(value) for key, value in data.items()}

    @classmethod
    def _apply_filters(
        cls,
        query: Any,
        filters: dict[str, Any] | None = None,
        in_filters: dict[str, Iterable[Any]] | None = None,
    ) -> Any:
        """Apply equality and membership filters to a PostgREST query."""
        for column, value in (filters or {}).items():
            if value is None:
                query = query.is_(column, "null")
            else:
                query = query.eq(column, cls._normalize_uuid(value))
        for column, values in (in_filters or {}).items():
            query = query.in_(column, [cls._normalize_uuid(v) for v in values])
        return query

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_row(
        cls,
        table: str,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch exactly one row matching the filters.

        Args:
            table: Table name
            filters: Column -> value equality filters
            columns: PostgREST column list

        Returns:
            Row dict, or None if no row matches

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            query = cls._apply_filters(client.table(table).select(columns), filters)
            response = query.single().execute()
            return response.data

        except Exception as e:
            # Check if it's a "not found" error
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch from {table}: {e}",
                code="FETCH_ROW_FAILED",
                suggestion=f"Check that the {table} table is accessible",
                details={"table": table, "filters": cls._normalize_data(filters)}
            )

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        filters: dict[str, Any] | None = None,
        in_filters: dict[str, Iterable[Any]] | None = None,
        columns: str = "*",
        order_by: str | list[str] | None = None,
        desc: bool = False,
    ) -> list[dict[str, Any]]:
        """
        Fetch every row matching the filters.

        Args:
            table: Table name
            filters: Column -> value equality filters
            in_filters: Column -> allowed values filters
            columns: PostgREST column list
            order_by: Column, or list of columns, to sort by
            desc: Sort descending

        Returns:
            List of row dicts (empty if none match)

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        # An empty IN list can never match; skip the round trip
        if in_filters and any(not list(values) for values in in_filters.values()):
            return []

        try:
            query = cls._apply_filters(
                client.table(table).select(columns), filters, in_filters
            )
            if order_by:
                for column in [order_by] if isinstance(order_by, str) else order_by:
                    query = query.order(column, desc=desc)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch from {table}: {e}",
                code="FETCH_ROWS_FAILED",
                suggestion=f"Check that the {table} table is accessible",
                details={"table": table}
            )

    @classmethod
    def count_rows(cls, table: str, filters: dict[str, Any] | None = None) -> int:
        """
        Count rows matching the filters using an exact count.

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            query = cls._apply_filters(
                client.table(table).select("id", count="exact"), filters
            )
            response = query.execute()
            return response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count rows in {table}: {e}",
                code="COUNT_FAILED",
                details={"table": table}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_rows(
        cls,
        table: str,
        rows: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """
        Insert one or more rows.

        Returns:
            Inserted rows with generated ids and timestamps

        Raises:
            SupabaseClientError: If the insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .insert([cls._normalize_data(row) for row in rows])
                .execute()
            )

            if response.data:
                return response.data
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table, "row_count": len(rows)}
            )

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a single row and return it."""
        return cls.insert_rows(table, [data])[0]

    @classmethod
    def update_rows(
        cls,
        table: str,
        data: dict[str, Any],
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Update every row matching the filters.

        Returns:
            Updated rows (empty if nothing matched)

        Raises:
            SupabaseClientError: If the update fails
        """
        client = cls.get_client()

        try:
            query = cls._apply_filters(
                client.table(table).update(cls._normalize_data(data)), filters
            )
            response = query.execute()
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "filters": cls._normalize_data(filters)}
            )

    @classmethod
    def upsert_row(
        cls,
        table: str,
        data: dict[str, Any],
        on_conflict: str,
    ) -> dict[str, Any]:
        """
        Insert a row, or update it when the conflict key already exists.

        Args:
            table: Table name
            data: Row payload (must include the conflict key columns)
            on_conflict: Comma-separated conflict key columns

        Returns:
            The stored row

        Raises:
            SupabaseClientError: If the upsert fails
        """
        return cls.upsert_rows(table, [data], on_conflict)[0]

    @classmethod
    def upsert_rows(
        cls,
        table: str,
        rows: list[dict[str, Any]],
        on_conflict: str,
    ) -> list[dict[str, Any]]:
        """Upsert several rows sharing one conflict key."""
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .upsert(
                    [cls._normalize_data(row) for row in rows],
                    on_conflict=on_conflict,
                )
                .execute()
            )

            if response.data:
                return response.data
            raise SupabaseClientError(
                message="Upsert returned no data",
                code="UPSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to upsert into {table}: {e}",
                code="UPSERT_FAILED",
                suggestion=f"Check that a unique constraint exists on ({on_conflict})",
                details={"table": table, "on_conflict": on_conflict}
            )

    @classmethod
    def delete_rows(cls, table: str, filters: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Delete every row matching the filters.

        Returns:
            Deleted rows

        Raises:
            SupabaseClientError: If the delete fails
        """
        client = cls.get_client()

        try:
            query = cls._apply_filters(client.table(table).delete(), filters)
            response = query.execute()
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, "filters": cls._normalize_data(filters)}
            )
