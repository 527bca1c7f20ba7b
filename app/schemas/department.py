from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


# ─── Request ──────────────────────────────────────────────────────────────────
class DepartmentCreateRequest(BaseModel):
    name:        str
    description: Optional[str] = None
    location:    Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if not v.strip(): raise ValueError("Department name is required")
        if len(v) > 100: raise ValueError("Department name must be between 1 and 100 characters")
        return v

    @field_validator("location")
    @classmethod
    def check_location(cls, v):
        if v is not None and len(v) > 100: raise ValueError("Location cannot exceed 100 characters")
        return v


class DepartmentUpdateRequest(DepartmentCreateRequest):
    """Full replacement: an omitted description or location clears the stored value."""
    pass


# ─── Response ─────────────────────────────────────────────────────────────────
class DepartmentOut(BaseModel):
    id:            int
    name:          str
    description:   Optional[str] = None
    location:      Optional[str] = None
    employeeCount: int
    createdAt:     Optional[datetime] = None
    updatedAt:     Optional[datetime] = None


class DepartmentSummaryOut(BaseModel):
    id:            int
    name:          str
    location:      Optional[str] = None
    employeeCount: int
