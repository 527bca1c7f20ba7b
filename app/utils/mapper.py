"""
Conversions between wire DTOs and ORM rows.

Nothing here touches the session: reads are plain attribute access and
writes only assign attributes on the row handed in. Department association
on employees is owned by employee_service, not by these functions.
"""
from app.models.department import Department
from app.models.employee import Employee
from app.schemas.department import (
    DepartmentCreateRequest, DepartmentUpdateRequest,
    DepartmentOut, DepartmentSummaryOut,
)
from app.schemas.employee import (
    EmployeeCreateRequest, EmployeeUpdateRequest,
    EmployeeOut, EmployeeSummaryOut,
)


def _employee_count(d: Department) -> int:
    return len(d.employees) if d.employees is not None else 0


# ─── Department ───────────────────────────────────────────────────────────────
def to_department_out(d: Department) -> DepartmentOut:
    return DepartmentOut(
        id=d.id,
        name=d.name,
        description=d.description,
        location=d.location,
        employeeCount=_employee_count(d),
        createdAt=d.createdAt,
        updatedAt=d.updatedAt,
    )


def to_department_summary(d: Department | None) -> DepartmentSummaryOut | None:
    if d is None:
        return None
    return DepartmentSummaryOut(
        id=d.id,
        name=d.name,
        location=d.location,
        employeeCount=_employee_count(d),
    )


def to_department_entity(data: DepartmentCreateRequest) -> Department:
    return Department(
        name=data.name,
        description=data.description,
        location=data.location,
    )


def update_department_entity(d: Department, data: DepartmentUpdateRequest) -> None:
    d.name        = data.name
    d.description = data.description
    d.location    = data.location


# ─── Employee ─────────────────────────────────────────────────────────────────
def to_employee_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=e.id,
        firstName=e.firstName,
        lastName=e.lastName,
        email=e.email,
        phone=e.phone,
        position=e.position,
        salary=e.salary,
        hireDate=e.hireDate,
        department=to_department_summary(e.department),
        createdAt=e.createdAt,
        updatedAt=e.updatedAt,
    )


def to_employee_summary(e: Employee) -> EmployeeSummaryOut:
    return EmployeeSummaryOut(
        id=e.id,
        firstName=e.firstName,
        lastName=e.lastName,
        email=e.email,
        position=e.position,
        departmentName=e.department.name if e.department is not None else None,
    )


def to_employee_entity(data: EmployeeCreateRequest) -> Employee:
    return Employee(
        firstName=data.firstName,
        lastName=data.lastName,
        email=data.email,
        phone=data.phone,
        position=data.position,
        salary=data.salary,
        hireDate=data.hireDate,
    )


def update_employee_entity(e: Employee, data: EmployeeUpdateRequest) -> None:
    e.firstName = data.firstName
    e.lastName  = data.lastName
    e.email     = data.email
    e.phone     = data.phone
    e.position  = data.position
    e.salary    = data.salary
    e.hireDate  = data.hireDate
