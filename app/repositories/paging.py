from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Query

from app.utils.exceptions import InvalidInputException

T = TypeVar("T")


@dataclass
class PageRequest:
    """Zero-indexed page request with an optional wire-level sort field."""
    page:     int = 0
    size:     int = 10
    sort_by:  str | None = None
    sort_dir: str = "asc"

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def ascending(self) -> bool:
        return self.sort_dir.lower() == "asc"


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int
    page:  int
    size:  int


def apply_sort(q: Query, sortable: dict, pageable: PageRequest, tiebreaker) -> Query:
    """
    Order ``q`` by the column registered under ``pageable.sort_by``.

    ``sortable`` maps wire field names to ORM columns; an unknown name is a
    client error rather than a silently ignored parameter. ``tiebreaker``
    (normally the primary key) is always appended so pages never overlap.
    """
    if pageable.sort_by:
        column = sortable.get(pageable.sort_by)
        if column is None:
            raise InvalidInputException(
                f"Cannot sort by '{pageable.sort_by}'. Allowed: {', '.join(sortable)}",
                field="sortBy",
            )
        q = q.order_by(column.asc() if pageable.ascending else column.desc())
    return q.order_by(tiebreaker.asc())


def paginate(q: Query, pageable: PageRequest) -> Page:
    total = q.order_by(None).count()
    items = q.offset(pageable.offset).limit(pageable.size).all()
    return Page(items=items, total=total, page=pageable.page, size=pageable.size)
