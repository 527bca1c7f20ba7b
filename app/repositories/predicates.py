"""
Small composable builders for WHERE clauses.

Each builder returns ``None`` when its parameter is absent, and
``all_of`` drops those, so an absent filter matches everything instead
of matching nothing.
"""
from sqlalchemy import and_, func, or_
from sqlalchemy.sql.elements import ColumnElement


def contains_any(keyword: str | None, *columns) -> ColumnElement | None:
    """Case-insensitive substring match of ``keyword``, taken verbatim, against any of ``columns``."""
    if not keyword:
        return None
    return or_(*[col.ilike(f"%{keyword}%") for col in columns])


def equals(column, value) -> ColumnElement | None:
    if value is None:
        return None
    return column == value


def equals_ignore_case(column, value: str | None) -> ColumnElement | None:
    if value is None:
        return None
    return func.lower(column) == value.lower()


def all_of(*predicates: ColumnElement | None) -> ColumnElement | None:
    present = [p for p in predicates if p is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)
