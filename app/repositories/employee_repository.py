from sqlalchemy.orm import Session, joinedload, selectinload

from app.models.department import Department
from app.models.employee import Employee
from app.repositories.paging import Page, PageRequest, apply_sort, paginate
from app.repositories.predicates import all_of, contains_any, equals, equals_ignore_case

SORTABLE_FIELDS = {
    "id":        Employee.id,
    "firstName": Employee.firstName,
    "lastName":  Employee.lastName,
    "email":     Employee.email,
    "position":  Employee.position,
    "salary":    Employee.salary,
    "hireDate":  Employee.hireDate,
    "createdAt": Employee.createdAt,
    "updatedAt": Employee.updatedAt,
}


class EmployeeRepository:

    def _base_query(self, db: Session):
        # department summary carries employeeCount, so pull both levels eagerly
        return db.query(Employee).options(
            joinedload(Employee.department).selectinload(Department.employees)
        )

    def _page(self, db: Session, criteria, pageable: PageRequest) -> Page[Employee]:
        q = self._base_query(db)
        if criteria is not None:
            q = q.filter(criteria)
        return paginate(q.order_by(Employee.id), pageable)

    def find_by_id(self, db: Session, employee_id: int) -> Employee | None:
        return db.query(Employee).filter(Employee.id == employee_id).first()

    def exists_by_email(self, db: Session, email: str, exclude_id: int | None = None) -> bool:
        q = db.query(Employee.id).filter(Employee.email == email)
        if exclude_id is not None:
            q = q.filter(Employee.id != exclude_id)
        return q.first() is not None

    def find_all(self, db: Session, pageable: PageRequest) -> Page[Employee]:
        q = apply_sort(self._base_query(db), SORTABLE_FIELDS, pageable, Employee.id)
        return paginate(q, pageable)

    def search(self, db: Session, keyword: str, pageable: PageRequest) -> Page[Employee]:
        criteria = contains_any(
            keyword, Employee.firstName, Employee.lastName, Employee.email, Employee.position,
        )
        return self._page(db, criteria, pageable)

    def filter(
        self, db: Session,
        department_id: int | None,
        position: str | None,
        search: str | None,
        pageable: PageRequest,
    ) -> Page[Employee]:
        criteria = all_of(
            equals(Employee.departmentId, department_id),
            equals_ignore_case(Employee.position, position),
            contains_any(search, Employee.firstName, Employee.lastName, Employee.email),
        )
        return self._page(db, criteria, pageable)

    def find_by_department(self, db: Session, department_id: int, pageable: PageRequest) -> Page[Employee]:
        return self._page(db, equals(Employee.departmentId, department_id), pageable)

    def list_by_department(self, db: Session, department_id: int) -> list[Employee]:
        return (
            self._base_query(db)
            .filter(Employee.departmentId == department_id)
            .order_by(Employee.lastName, Employee.firstName, Employee.id)
            .all()
        )

    def list_all(self, db: Session) -> list[Employee]:
        return self._base_query(db).order_by(Employee.id).all()


employee_repository = EmployeeRepository()
