from fastapi import Query

from app.config import settings
from app.repositories.paging import PageRequest


# ─── Paging ───────────────────────────────────────────────────────────────────
def get_page_request(
    page: int = Query(0, ge=0, description="Page number (0-indexed)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"),
) -> PageRequest:
    """Unsorted page; the query layer falls back to ascending id."""
    return PageRequest(page=page, size=size)


# ─── Sorted Paging ────────────────────────────────────────────────────────────
def sorted_page_request(default_sort: str):
    """
    Factory that returns a FastAPI dependency reading page, size, sortBy and
    sortDir, with ``default_sort`` used when sortBy is not supplied.

    Usage:
        @router.get("")
        def list_items(pageable: PageRequest = Depends(sorted_page_request("name"))):
            ...
    """
    def dependency(
        page:    int = Query(0, ge=0, description="Page number (0-indexed)"),
        size:    int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE,
                             description="Page size"),
        sortBy:  str = Query(default_sort, description="Sort by field"),
        sortDir: str = Query("asc", description="Sort direction (asc/desc)"),
    ) -> PageRequest:
        return PageRequest(page=page, size=size, sort_by=sortBy, sort_dir=sortDir)
    return dependency
