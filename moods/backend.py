"""Table-style data API over the two logical tables, ``profiles`` and ``moods``.

Views talk to storage only through these functions. Every failure surfaces
as :class:`BackendError`, carrying a short machine-readable ``code``.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.core.exceptions import FieldError, ValidationError
from django.db import DatabaseError, models, transaction

from .models import Mood, Profile

logger = logging.getLogger(__name__)

# Error codes
NO_ROWS = "no_rows"
MULTIPLE_ROWS = "multiple_rows"
UNKNOWN_TABLE = "unknown_table"
DATABASE_ERROR = "database_error"
INVALID_ROW = "invalid_row"

TABLES: dict[str, type[models.Model]] = {
    "profiles": Profile,
    "moods": Mood,
}


class BackendError(Exception):
    """A failed backend call: human description plus an error code."""

    def __init__(self, message: str, code: str = DATABASE_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


def _table(name: str) -> type[models.Model]:
    try:
        return TABLES[name]
    except KeyError:
        raise BackendError(f"Unknown table '{name}'", code=UNKNOWN_TABLE) from None


def _fetch(
    table: str,
    eq: Optional[Mapping[str, Any]],
    order_by: Optional[str],
    descending: bool,
    limit: Optional[int],
) -> list[Any]:
    model = _table(table)
    try:
        qs = model._default_manager.all()
        if eq:
            qs = qs.filter(**eq)
        if order_by:
            qs = qs.order_by(f"-{order_by}" if descending else order_by)
        if limit is not None:
            qs = qs[:limit]
        return list(qs)
    except (DatabaseError, FieldError, ValidationError, ValueError, OverflowError) as exc:
        raise BackendError(f"select from {table} failed: {exc}") from exc


def select(
    table: str,
    *,
    eq: Optional[Mapping[str, Any]] = None,
    order_by: Optional[str] = None,
    descending: bool = False,
    limit: Optional[int] = None,
) -> list[Any]:
    """Read rows, optionally filtered by equality, ordered and limited.

    Args:
        table: "profiles" or "moods".
        eq: Column -> value equality filters (ANDed).
        order_by: Column to order by.
        descending: Order newest/largest first.
        limit: Maximum number of rows; None means unbounded.

    Returns:
        List of model instances.
    """
    return _fetch(table, eq, order_by, descending, limit)


def single(table: str, *, eq: Mapping[str, Any]) -> Any:
    """Return exactly one row; NO_ROWS / MULTIPLE_ROWS otherwise."""
    rows = _fetch(table, eq, None, False, 2)
    if not rows:
        raise BackendError(f"No rows in {table} matching {dict(eq)}", code=NO_ROWS)
    if len(rows) > 1:
        raise BackendError(f"Multiple rows in {table} matching {dict(eq)}", code=MULTIPLE_ROWS)
    return rows[0]


def insert(table: str, values: Mapping[str, Any]) -> Any:
    """Insert one row; id and created_at are assigned on save."""
    model = _table(table)
    try:
        with transaction.atomic():
            obj = model(**values)
            obj.full_clean(exclude=["user"])
            obj.save(force_insert=True)
    except ValidationError as exc:
        raise BackendError(f"insert into {table} rejected: {exc}", code=INVALID_ROW) from exc
    except (DatabaseError, TypeError) as exc:
        raise BackendError(f"insert into {table} failed: {exc}") from exc
    logger.debug("Inserted %s row %s", table, obj.pk)
    return obj


def update(table: str, values: Mapping[str, Any], *, eq: Mapping[str, Any]) -> int:
    """Update matching rows in place; returns the number of rows changed."""
    if table == "moods":
        raise BackendError("Mood entries are immutable", code=INVALID_ROW)
    model = _table(table)
    try:
        with transaction.atomic():
            return model._default_manager.filter(**eq).update(**values)
    except (DatabaseError, FieldError, ValueError, OverflowError) as exc:
        raise BackendError(f"update of {table} failed: {exc}") from exc
