from sqlalchemy.orm import Session, selectinload

from app.models.department import Department
from app.repositories.paging import Page, PageRequest, apply_sort, paginate
from app.repositories.predicates import contains_any

SORTABLE_FIELDS = {
    "id":        Department.id,
    "name":      Department.name,
    "location":  Department.location,
    "createdAt": Department.createdAt,
    "updatedAt": Department.updatedAt,
}


class DepartmentRepository:

    def _base_query(self, db: Session):
        # employeeCount needs the collection; load it per page, not per row
        return db.query(Department).options(selectinload(Department.employees))

    def find_by_id(self, db: Session, department_id: int) -> Department | None:
        return db.query(Department).filter(Department.id == department_id).first()

    def exists_by_id(self, db: Session, department_id: int) -> bool:
        return db.query(Department.id).filter(Department.id == department_id).first() is not None

    def exists_by_name(self, db: Session, name: str, exclude_id: int | None = None) -> bool:
        q = db.query(Department.id).filter(Department.name == name)
        if exclude_id is not None:
            q = q.filter(Department.id != exclude_id)
        return q.first() is not None

    def find_all(self, db: Session, pageable: PageRequest) -> Page[Department]:
        q = apply_sort(self._base_query(db), SORTABLE_FIELDS, pageable, Department.id)
        return paginate(q, pageable)

    def search(self, db: Session, keyword: str, pageable: PageRequest) -> Page[Department]:
        q = self._base_query(db)
        predicate = contains_any(keyword, Department.name, Department.location)
        if predicate is not None:
            q = q.filter(predicate)
        return paginate(q.order_by(Department.id), pageable)

    def list_all(self, db: Session) -> list[Department]:
        return self._base_query(db).order_by(Department.id).all()


department_repository = DepartmentRepository()
