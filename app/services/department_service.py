import logging

from sqlalchemy.orm import Session

from app.models.department import Department
from app.repositories.department_repository import department_repository
from app.repositories.employee_repository import employee_repository
from app.repositories.paging import PageRequest
from app.schemas.common import PageResponse, page_response
from app.schemas.department import DepartmentCreateRequest, DepartmentUpdateRequest, DepartmentOut
from app.schemas.employee import EmployeeSummaryOut
from app.database import commit_or_conflict
from app.utils import mapper
from app.utils.exceptions import NotFoundException, DuplicateEntryException

logger = logging.getLogger(__name__)


def _duplicate_name_message(name: str) -> str:
    return f"Department with name '{name}' already exists"


class DepartmentService:

    def _get_or_404(self, db: Session, department_id: int) -> Department:
        d = department_repository.find_by_id(db, department_id)
        if not d:
            raise NotFoundException("Department", department_id)
        return d

    # ─── Create ───────────────────────────────────────────────────────────────
    def create_department(self, db: Session, data: DepartmentCreateRequest) -> DepartmentOut:
        logger.info(f"Creating new department: {data.name}")

        if department_repository.exists_by_name(db, data.name):
            raise DuplicateEntryException(_duplicate_name_message(data.name), field="name")

        d = mapper.to_department_entity(data)
        db.add(d)
        commit_or_conflict(db, _duplicate_name_message(data.name), field="name")
        db.refresh(d)

        logger.info(f"Department created successfully with ID: {d.id}")
        return mapper.to_department_out(d)

    # ─── Get by ID ────────────────────────────────────────────────────────────
    def get_department(self, db: Session, department_id: int) -> DepartmentOut:
        logger.info(f"Fetching department with ID: {department_id}")
        return mapper.to_department_out(self._get_or_404(db, department_id))

    # ─── List (paginated) ─────────────────────────────────────────────────────
    def list_departments(self, db: Session, pageable: PageRequest) -> PageResponse[DepartmentOut]:
        logger.info(f"Fetching all departments - Page: {pageable.page}, Size: {pageable.size}")
        page = department_repository.find_all(db, pageable)
        return page_response([mapper.to_department_out(d) for d in page.items],
                             page.total, page.page, page.size)

    # ─── Search ───────────────────────────────────────────────────────────────
    def search_departments(self, db: Session, keyword: str, pageable: PageRequest) -> PageResponse[DepartmentOut]:
        logger.info(f"Searching departments with keyword: {keyword}")
        page = department_repository.search(db, keyword, pageable)
        return page_response([mapper.to_department_out(d) for d in page.items],
                             page.total, page.page, page.size)

    # ─── Update ───────────────────────────────────────────────────────────────
    def update_department(self, db: Session, department_id: int, data: DepartmentUpdateRequest) -> DepartmentOut:
        logger.info(f"Updating department with ID: {department_id}")

        d = self._get_or_404(db, department_id)
        if data.name != d.name and department_repository.exists_by_name(db, data.name, exclude_id=d.id):
            raise DuplicateEntryException(_duplicate_name_message(data.name), field="name")

        mapper.update_department_entity(d, data)
        commit_or_conflict(db, _duplicate_name_message(data.name), field="name")
        db.refresh(d)

        logger.info(f"Department updated successfully with ID: {department_id}")
        return mapper.to_department_out(d)

    # ─── Delete ───────────────────────────────────────────────────────────────
    def delete_department(self, db: Session, department_id: int) -> None:
        logger.info(f"Deleting department with ID: {department_id}")

        d = self._get_or_404(db, department_id)
        # Employees share their department's lifecycle; remove them in the
        # same transaction instead of trusting every backend's FK cascade.
        staff = list(d.employees)
        for e in staff:
            db.delete(e)
        db.delete(d)
        db.commit()

        logger.info(f"Department deleted successfully with ID: {department_id} "
                    f"({len(staff)} employee(s) removed)")

    # ─── List (unpaginated) ───────────────────────────────────────────────────
    def list_all_departments(self, db: Session) -> list[DepartmentOut]:
        logger.info("Fetching all departments list")
        return [mapper.to_department_out(d) for d in department_repository.list_all(db)]

    # ─── Staff roster ─────────────────────────────────────────────────────────
    def list_department_staff(self, db: Session, department_id: int) -> list[EmployeeSummaryOut]:
        logger.info(f"Fetching staff roster for department ID: {department_id}")
        self._get_or_404(db, department_id)
        return [mapper.to_employee_summary(e)
                for e in employee_repository.list_by_department(db, department_id)]


department_service = DepartmentService()
