from pydantic import BaseModel
from typing import TypeVar, Generic

T = TypeVar("T")


# ─── Error Detail (per field) ──────────────────────────────────────────────────
class ErrorDetail(BaseModel):
    field: str
    message: str


# ─── Error Body ───────────────────────────────────────────────────────────────
class ErrorBody(BaseModel):
    code: str
    details: list[ErrorDetail] | None = None
    field: str | None = None


# ─── Error Response ───────────────────────────────────────────────────────────
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


# ─── Paginated Response ───────────────────────────────────────────────────────
class PageResponse(BaseModel, Generic[T]):
    content:       list[T]
    pageNumber:    int
    pageSize:      int
    totalElements: int
    totalPages:    int
    last:          bool


def page_response(content: list, total: int, page: int, size: int) -> PageResponse:
    """Wrap one zero-indexed page of mapped items in the paging envelope."""
    total_pages = (total + size - 1) // size if size > 0 else 0
    return PageResponse(
        content=content,
        pageNumber=page,
        pageSize=size,
        totalElements=total,
        totalPages=total_pages,
        last=page + 1 >= total_pages,
    )


# Reusable OpenAPI "responses" blocks for route decorators
NOT_FOUND_RESPONSE  = {404: {"model": ErrorResponse, "description": "Referenced record does not exist"}}
CONFLICT_RESPONSE   = {409: {"model": ErrorResponse, "description": "Unique value already in use"}}
INVALID_RESPONSE    = {400: {"model": ErrorResponse, "description": "Invalid input data"}}
