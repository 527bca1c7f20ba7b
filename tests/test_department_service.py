import pytest

from app.models.department import Department
from app.models.employee import Employee
from app.repositories.department_repository import department_repository
from app.repositories.paging import PageRequest
from app.schemas.department import DepartmentUpdateRequest
from app.services.department_service import department_service
from app.services.employee_service import employee_service
from app.utils.exceptions import DuplicateEntryException, InvalidInputException, NotFoundException
from factories import department_request, employee_request


def test_create_then_get_returns_same_record(db):
    created = department_service.create_department(db, department_request("Engineering"))

    assert created.id is not None
    assert created.name == "Engineering"
    assert created.location == "Austin"
    assert created.employeeCount == 0
    assert created.createdAt is not None

    fetched = department_service.get_department(db, created.id)
    assert fetched == created


def test_create_duplicate_name_leaves_store_unchanged(db):
    department_service.create_department(db, department_request("Engineering"))

    with pytest.raises(DuplicateEntryException) as exc:
        department_service.create_department(db, department_request("Engineering", location="Berlin"))

    assert exc.value.message == "Department with name 'Engineering' already exists"
    assert db.query(Department).count() == 1


def test_name_uniqueness_is_case_sensitive(db):
    department_service.create_department(db, department_request("Engineering"))
    department_service.create_department(db, department_request("engineering"))

    assert db.query(Department).count() == 2


def test_constraint_violation_at_commit_surfaces_as_duplicate(db, monkeypatch):
    department_service.create_department(db, department_request("Engineering"))
    # a concurrent writer that slipped past the pre-check
    monkeypatch.setattr(department_repository, "exists_by_name", lambda *args, **kwargs: False)

    with pytest.raises(DuplicateEntryException):
        department_service.create_department(db, department_request("Engineering"))

    assert db.query(Department).count() == 1


def test_get_missing_department_raises_not_found(db):
    with pytest.raises(NotFoundException) as exc:
        department_service.get_department(db, 999)
    assert exc.value.message == "Department not found with ID: 999"


def test_update_keeping_same_name_skips_duplicate_check(db):
    d = department_service.create_department(db, department_request("Engineering"))

    updated = department_service.update_department(
        db, d.id, DepartmentUpdateRequest(name="Engineering", location="Denver"),
    )

    assert updated.name == "Engineering"
    assert updated.location == "Denver"


def test_update_to_name_of_another_department_conflicts(db):
    department_service.create_department(db, department_request("Engineering"))
    sales = department_service.create_department(db, department_request("Sales"))

    with pytest.raises(DuplicateEntryException):
        department_service.update_department(db, sales.id, DepartmentUpdateRequest(name="Engineering"))

    assert department_service.get_department(db, sales.id).name == "Sales"


def test_update_to_unused_name_succeeds(db):
    sales = department_service.create_department(db, department_request("Sales"))

    updated = department_service.update_department(db, sales.id, DepartmentUpdateRequest(name="Marketing"))

    assert updated.name == "Marketing"


def test_update_clears_omitted_optional_fields(db):
    d = department_service.create_department(db, department_request("Engineering"))

    updated = department_service.update_department(db, d.id, DepartmentUpdateRequest(name="Engineering"))

    assert updated.description is None
    assert updated.location is None


def test_update_missing_department_raises_not_found(db):
    with pytest.raises(NotFoundException):
        department_service.update_department(db, 42, DepartmentUpdateRequest(name="Nope"))


def test_delete_cascades_to_employees(db):
    d = department_service.create_department(db, department_request("Engineering"))
    ada = employee_service.create_employee(db, employee_request("ada@company.com", departmentId=d.id))
    alan = employee_service.create_employee(db, employee_request("alan@company.com", departmentId=d.id))
    loner = employee_service.create_employee(db, employee_request("grace@company.com"))

    department_service.delete_department(db, d.id)

    with pytest.raises(NotFoundException):
        department_service.get_department(db, d.id)
    for e in (ada, alan):
        with pytest.raises(NotFoundException):
            employee_service.get_employee(db, e.id)
    assert employee_service.get_employee(db, loner.id).email == "grace@company.com"
    assert db.query(Employee).count() == 1


def test_delete_missing_department_raises_not_found(db):
    with pytest.raises(NotFoundException):
        department_service.delete_department(db, 7)


def test_list_paginates_with_stable_sort(db):
    for name in ("Sales", "Engineering", "Marketing"):
        department_service.create_department(db, department_request(name))

    first = department_service.list_departments(db, PageRequest(page=0, size=2, sort_by="name"))
    second = department_service.list_departments(db, PageRequest(page=1, size=2, sort_by="name"))

    assert [d.name for d in first.content] == ["Engineering", "Marketing"]
    assert [d.name for d in second.content] == ["Sales"]
    assert first.totalElements == 3
    assert first.totalPages == 2
    assert first.last is False
    assert second.last is True


def test_list_sorts_descending(db):
    for name in ("Sales", "Engineering", "Marketing"):
        department_service.create_department(db, department_request(name))

    page = department_service.list_departments(db, PageRequest(size=10, sort_by="name", sort_dir="DESC"))

    assert [d.name for d in page.content] == ["Sales", "Marketing", "Engineering"]


def test_list_rejects_unknown_sort_field(db):
    with pytest.raises(InvalidInputException) as exc:
        department_service.list_departments(db, PageRequest(sort_by="budget"))
    assert exc.value.field == "sortBy"


def test_search_matches_name_or_location_ignoring_case(db):
    department_service.create_department(db, department_request("Engineering", location="Austin"))
    department_service.create_department(db, department_request("Sales", location="Boston"))
    department_service.create_department(db, department_request("Support", location="Houston"))

    by_name = department_service.search_departments(db, "ENGIN", PageRequest())
    by_location = department_service.search_departments(db, "ston", PageRequest())

    assert [d.name for d in by_name.content] == ["Engineering"]
    assert {d.name for d in by_location.content} == {"Sales", "Support"}


def test_employee_count_tracks_live_membership(db):
    d = department_service.create_department(db, department_request("Engineering"))
    e1 = employee_service.create_employee(db, employee_request("ada@company.com", departmentId=d.id))
    employee_service.create_employee(db, employee_request("alan@company.com", departmentId=d.id))
    assert department_service.get_department(db, d.id).employeeCount == 2

    employee_service.delete_employee(db, e1.id)

    assert department_service.get_department(db, d.id).employeeCount == 1
    assert department_service.get_department(db, d.id).name == "Engineering"


def test_list_all_is_unpaginated(db):
    for i in range(12):
        department_service.create_department(db, department_request(f"Dept {i:02d}"))

    assert len(department_service.list_all_departments(db)) == 12


def test_staff_roster_uses_compact_summaries(db):
    d = department_service.create_department(db, department_request("Engineering"))
    employee_service.create_employee(db, employee_request("ada@company.com", departmentId=d.id))
    employee_service.create_employee(db, employee_request("grace@company.com"))

    roster = department_service.list_department_staff(db, d.id)

    assert len(roster) == 1
    assert roster[0].email == "ada@company.com"
    assert roster[0].departmentName == "Engineering"

    with pytest.raises(NotFoundException):
        department_service.list_department_staff(db, 999)
