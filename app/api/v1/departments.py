from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_page_request, sorted_page_request
from app.repositories.paging import PageRequest
from app.schemas.common import PageResponse, NOT_FOUND_RESPONSE, CONFLICT_RESPONSE, INVALID_RESPONSE
from app.schemas.department import DepartmentCreateRequest, DepartmentUpdateRequest, DepartmentOut
from app.schemas.employee import EmployeeSummaryOut
from app.services.department_service import department_service

router = APIRouter(prefix="/departments")


# POST /departments
@router.post("", status_code=status.HTTP_201_CREATED, response_model=DepartmentOut,
             summary="Create a new department", responses={**INVALID_RESPONSE, **CONFLICT_RESPONSE})
def create_department(body: DepartmentCreateRequest, db: Session = Depends(get_db)):
    return department_service.create_department(db, body)


# GET /departments
@router.get("", response_model=PageResponse[DepartmentOut],
            summary="Get all departments (paginated, sortable)")
def list_departments(
    pageable: PageRequest = Depends(sorted_page_request("name")),
    db:       Session     = Depends(get_db),
):
    return department_service.list_departments(db, pageable)


# GET /departments/search — declared before /{department_id}
@router.get("/search", response_model=PageResponse[DepartmentOut],
            summary="Search departments by name or location")
def search_departments(
    search:   str         = Query(..., description="Search keyword"),
    pageable: PageRequest = Depends(get_page_request),
    db:       Session     = Depends(get_db),
):
    return department_service.search_departments(db, search, pageable)


# GET /departments/list
@router.get("/list", response_model=list[DepartmentOut], summary="Get all departments without pagination")
def list_all_departments(db: Session = Depends(get_db)):
    return department_service.list_all_departments(db)


# GET /departments/{id}
@router.get("/{department_id}", response_model=DepartmentOut,
            summary="Get department by ID", responses=NOT_FOUND_RESPONSE)
def get_department(department_id: int, db: Session = Depends(get_db)):
    return department_service.get_department(db, department_id)


# GET /departments/{id}/employees
@router.get("/{department_id}/employees", response_model=list[EmployeeSummaryOut],
            summary="List the staff of a department", responses=NOT_FOUND_RESPONSE)
def list_department_staff(department_id: int, db: Session = Depends(get_db)):
    return department_service.list_department_staff(db, department_id)


# PUT /departments/{id}
@router.put("/{department_id}", response_model=DepartmentOut, summary="Update department",
            responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE})
def update_department(department_id: int, body: DepartmentUpdateRequest, db: Session = Depends(get_db)):
    return department_service.update_department(db, department_id, body)


# DELETE /departments/{id} — also removes the department's employees
@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete department", responses=NOT_FOUND_RESPONSE)
def delete_department(department_id: int, db: Session = Depends(get_db)):
    department_service.delete_department(db, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
