from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.dependencies import get_page_request, sorted_page_request
from app.repositories.paging import PageRequest
from app.schemas.common import PageResponse, NOT_FOUND_RESPONSE, CONFLICT_RESPONSE, INVALID_RESPONSE
from app.schemas.employee import EmployeeCreateRequest, EmployeeUpdateRequest, EmployeeOut
from app.services.employee_service import employee_service

router = APIRouter(prefix="/employees")


# POST /employees
@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeOut,
             summary="Create a new employee",
             responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE})
def create_employee(body: EmployeeCreateRequest, db: Session = Depends(get_db)):
    return employee_service.create_employee(db, body)


# GET /employees
@router.get("", response_model=PageResponse[EmployeeOut], summary="Get all employees (paginated, sortable)")
def list_employees(
    pageable: PageRequest = Depends(sorted_page_request("firstName")),
    db:       Session     = Depends(get_db),
):
    return employee_service.list_employees(db, pageable)


# GET /employees/search
@router.get("/search", response_model=PageResponse[EmployeeOut],
            summary="Search employees by name, email or position")
def search_employees(
    search:   str         = Query(..., description="Search keyword"),
    pageable: PageRequest = Depends(get_page_request),
    db:       Session     = Depends(get_db),
):
    return employee_service.search_employees(db, search, pageable)


# GET /employees/filter — every predicate optional, combined with AND
@router.get("/filter", response_model=PageResponse[EmployeeOut],
            summary="Filter employees by department, position or search term")
def filter_employees(
    departmentId: Optional[int] = Query(None, description="Department ID"),
    position:     Optional[str] = Query(None, description="Position (case-insensitive exact match)"),
    search:       Optional[str] = Query(None, description="Search keyword over name and email"),
    pageable:     PageRequest   = Depends(get_page_request),
    db:           Session       = Depends(get_db),
):
    return employee_service.filter_employees(db, departmentId, position, search, pageable)


# GET /employees/department/{departmentId}
@router.get("/department/{departmentId}", response_model=PageResponse[EmployeeOut],
            summary="Get employees by department", responses=NOT_FOUND_RESPONSE)
def list_by_department(
    departmentId: int,
    pageable:     PageRequest = Depends(get_page_request),
    db:           Session     = Depends(get_db),
):
    return employee_service.list_by_department(db, departmentId, pageable)


# GET /employees/list
@router.get("/list", response_model=list[EmployeeOut], summary="Get all employees without pagination")
def list_all_employees(db: Session = Depends(get_db)):
    return employee_service.list_all_employees(db)


# GET /employees/{id}
@router.get("/{employee_id}", response_model=EmployeeOut,
            summary="Get employee by ID", responses=NOT_FOUND_RESPONSE)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return employee_service.get_employee(db, employee_id)


# PUT /employees/{id} — full replace; omitting departmentId unassigns the employee
@router.put("/{employee_id}", response_model=EmployeeOut, summary="Update employee",
            responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE})
def update_employee(employee_id: int, body: EmployeeUpdateRequest, db: Session = Depends(get_db)):
    return employee_service.update_employee(db, employee_id, body)


# DELETE /employees/{id}
@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete employee", responses=NOT_FOUND_RESPONSE)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    employee_service.delete_employee(db, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
