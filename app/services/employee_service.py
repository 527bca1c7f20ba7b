import logging

from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee
from app.repositories.department_repository import department_repository
from app.repositories.employee_repository import employee_repository
from app.repositories.paging import Page, PageRequest
from app.schemas.common import PageResponse, page_response
from app.schemas.employee import EmployeeCreateRequest, EmployeeUpdateRequest, EmployeeOut
from app.database import commit_or_conflict
from app.utils import mapper
from app.utils.exceptions import NotFoundException, DuplicateEntryException

logger = logging.getLogger(__name__)


def _duplicate_email_message(email: str) -> str:
    return f"Employee with email '{email}' already exists"


def _to_page_response(page: Page[Employee]) -> PageResponse[EmployeeOut]:
    return page_response([mapper.to_employee_out(e) for e in page.items],
                         page.total, page.page, page.size)


class EmployeeService:

    def _get_or_404(self, db: Session, employee_id: int) -> Employee:
        e = employee_repository.find_by_id(db, employee_id)
        if not e:
            raise NotFoundException("Employee", employee_id)
        return e

    def _get_department_or_404(self, db: Session, department_id: int) -> Department:
        d = department_repository.find_by_id(db, department_id)
        if not d:
            raise NotFoundException("Department", department_id)
        return d

    # ─── Create ───────────────────────────────────────────────────────────────
    def create_employee(self, db: Session, data: EmployeeCreateRequest) -> EmployeeOut:
        logger.info(f"Creating new employee: {data.email}")

        if employee_repository.exists_by_email(db, data.email):
            raise DuplicateEntryException(_duplicate_email_message(data.email), field="email")

        e = mapper.to_employee_entity(data)
        if data.departmentId is not None:
            e.department = self._get_department_or_404(db, data.departmentId)

        db.add(e)
        commit_or_conflict(db, _duplicate_email_message(data.email), field="email")
        db.refresh(e)

        logger.info(f"Employee created successfully with ID: {e.id}")
        return mapper.to_employee_out(e)

    # ─── Get by ID ────────────────────────────────────────────────────────────
    def get_employee(self, db: Session, employee_id: int) -> EmployeeOut:
        logger.info(f"Fetching employee with ID: {employee_id}")
        return mapper.to_employee_out(self._get_or_404(db, employee_id))

    # ─── List (paginated) ─────────────────────────────────────────────────────
    def list_employees(self, db: Session, pageable: PageRequest) -> PageResponse[EmployeeOut]:
        logger.info(f"Fetching all employees - Page: {pageable.page}, Size: {pageable.size}")
        return _to_page_response(employee_repository.find_all(db, pageable))

    # ─── Search ───────────────────────────────────────────────────────────────
    def search_employees(self, db: Session, keyword: str, pageable: PageRequest) -> PageResponse[EmployeeOut]:
        logger.info(f"Searching employees with keyword: {keyword}")
        return _to_page_response(employee_repository.search(db, keyword, pageable))

    # ─── Filter ───────────────────────────────────────────────────────────────
    def filter_employees(
        self, db: Session,
        department_id: int | None,
        position: str | None,
        search: str | None,
        pageable: PageRequest,
    ) -> PageResponse[EmployeeOut]:
        logger.info(f"Filtering employees - Department: {department_id}, "
                    f"Position: {position}, Search: {search}")
        return _to_page_response(
            employee_repository.filter(db, department_id, position, search, pageable)
        )

    # ─── By Department ────────────────────────────────────────────────────────
    def list_by_department(self, db: Session, department_id: int, pageable: PageRequest) -> PageResponse[EmployeeOut]:
        logger.info(f"Fetching employees for department ID: {department_id}")

        if not department_repository.exists_by_id(db, department_id):
            raise NotFoundException("Department", department_id)

        return _to_page_response(employee_repository.find_by_department(db, department_id, pageable))

    # ─── Update ───────────────────────────────────────────────────────────────
    def update_employee(self, db: Session, employee_id: int, data: EmployeeUpdateRequest) -> EmployeeOut:
        logger.info(f"Updating employee with ID: {employee_id}")

        e = self._get_or_404(db, employee_id)
        if data.email != e.email and employee_repository.exists_by_email(db, data.email, exclude_id=e.id):
            raise DuplicateEntryException(_duplicate_email_message(data.email), field="email")

        mapper.update_employee_entity(e, data)

        # Full replace: no departmentId means "unassigned", not "unchanged"
        if data.departmentId is not None:
            e.department = self._get_department_or_404(db, data.departmentId)
        else:
            e.department = None

        commit_or_conflict(db, _duplicate_email_message(data.email), field="email")
        db.refresh(e)

        logger.info(f"Employee updated successfully with ID: {employee_id}")
        return mapper.to_employee_out(e)

    # ─── Delete ───────────────────────────────────────────────────────────────
    def delete_employee(self, db: Session, employee_id: int) -> None:
        logger.info(f"Deleting employee with ID: {employee_id}")

        e = self._get_or_404(db, employee_id)
        department = e.department
        db.delete(e)
        db.commit()
        if department is not None:
            # the parent keeps its loaded collection across commits
            db.expire(department, ["employees"])

        logger.info(f"Employee deleted successfully with ID: {employee_id}")

    # ─── List (unpaginated) ───────────────────────────────────────────────────
    def list_all_employees(self, db: Session) -> list[EmployeeOut]:
        logger.info("Fetching all employees list")
        return [mapper.to_employee_out(e) for e in employee_repository.list_all(db)]


employee_service = EmployeeService()
