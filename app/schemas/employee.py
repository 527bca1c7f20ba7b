from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
import re

from email_validator import EmailNotValidError, validate_email

from app.schemas.department import DepartmentSummaryOut

PHONE_PATTERN = re.compile(r"^[0-9\-+()\s]*$")

# column bounds of employees.phone / employees.salary
PHONE_MAX_LENGTH = 30
SALARY_MAX_DIGITS = 12
SALARY_DECIMAL_PLACES = 2


def validate_person_name(v: str, label: str) -> str:
    if not v.strip():
        raise ValueError(f"{label} is required")
    if not (2 <= len(v) <= 50):
        raise ValueError(f"{label} must be between 2 and 50 characters")
    return v


def validate_email_address(v: str) -> str:
    """Syntax check only; the address is stored exactly as given."""
    if not v.strip():
        raise ValueError("Email is required")
    try:
        validate_email(v, check_deliverability=False, test_environment=True)
    except EmailNotValidError as e:
        raise ValueError(f"Email should be valid: {e}")
    return v


# ─── Request ──────────────────────────────────────────────────────────────────
class EmployeeCreateRequest(BaseModel):
    firstName:    str
    lastName:     str
    email:        str
    phone:        Optional[str] = None
    position:     Optional[str] = None
    salary:       Optional[Decimal] = None
    hireDate:     Optional[date] = None
    departmentId: Optional[int] = None

    @field_validator("firstName")
    @classmethod
    def check_first_name(cls, v): return validate_person_name(v, "First name")

    @field_validator("lastName")
    @classmethod
    def check_last_name(cls, v): return validate_person_name(v, "Last name")

    @field_validator("email")
    @classmethod
    def check_email(cls, v): return validate_email_address(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        if v is None: return v
        if not PHONE_PATTERN.match(v): raise ValueError("Invalid phone number format")
        if len(v) > PHONE_MAX_LENGTH: raise ValueError(f"Phone cannot exceed {PHONE_MAX_LENGTH} characters")
        return v

    @field_validator("position")
    @classmethod
    def check_position(cls, v):
        if v is not None and len(v) > 100: raise ValueError("Position cannot exceed 100 characters")
        return v

    @field_validator("salary")
    @classmethod
    def check_salary(cls, v):
        if v is None: return v
        if not v.is_finite(): raise ValueError("Salary must be a finite number")
        if v <= 0: raise ValueError("Salary must be greater than 0")
        if -v.as_tuple().exponent > SALARY_DECIMAL_PLACES:
            raise ValueError(f"Salary cannot have more than {SALARY_DECIMAL_PLACES} decimal places")
        if v >= Decimal(10) ** (SALARY_MAX_DIGITS - SALARY_DECIMAL_PLACES):
            raise ValueError(
                f"Salary cannot exceed {SALARY_MAX_DIGITS - SALARY_DECIMAL_PLACES} integer digits"
            )
        return v

    @field_validator("hireDate")
    @classmethod
    def check_hire_date(cls, v):
        if v is not None and v > date.today(): raise ValueError("Hire date cannot be in the future")
        return v


class EmployeeUpdateRequest(EmployeeCreateRequest):
    """
    Full replacement of every mutable field. Optional fields left out are
    cleared, and a missing departmentId detaches the employee.
    """
    pass


# ─── Response ─────────────────────────────────────────────────────────────────
class EmployeeOut(BaseModel):
    id:         int
    firstName:  str
    lastName:   str
    email:      str
    phone:      Optional[str] = None
    position:   Optional[str] = None
    salary:     Optional[Decimal] = None
    hireDate:   Optional[date] = None
    department: Optional[DepartmentSummaryOut] = None
    createdAt:  Optional[datetime] = None
    updatedAt:  Optional[datetime] = None


class EmployeeSummaryOut(BaseModel):
    id:             int
    firstName:      str
    lastName:       str
    email:          str
    position:       Optional[str] = None
    departmentName: Optional[str] = None
