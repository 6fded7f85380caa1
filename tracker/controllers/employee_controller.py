"""
Employee Controller: Handles the queries and writes related to the Employee model.
These functions are called by the employee views of the main menu.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

import sentry_sdk

from tracker.controllers.utils import report_query_failure
from tracker.models import Department, Employee, Role
from tracker.records import Choice, EmployeeRecord


def _manager_name(first_name: str | None, last_name: str | None) -> str | None:
    if first_name is None and last_name is None:
        return None
    return f"{first_name or ''} {last_name or ''}".strip()


# =============================================================================
# --- READS ---
# =============================================================================


def list_employees(session: Session) -> list[EmployeeRecord] | None:
    """
    Retrieves the employee report, ordered by ID.

    Role, department and manager are outer-joined so an employee whose
    references cannot be resolved is still listed, with empty fields.
    Returns None if the query failed.
    """
    manager = aliased(Employee, name="manager")

    try:
        rows = (
            session.query(
                Employee.id,
                Employee.first_name,
                Employee.last_name,
                Role.title,
                Department.name.label("department"),
                Role.salary,
                manager.first_name.label("manager_first_name"),
                manager.last_name.label("manager_last_name"),
            )
            .outerjoin(Role, Employee.role_id == Role.id)
            .outerjoin(Department, Role.department_id == Department.id)
            .outerjoin(manager, Employee.manager_id == manager.id)
            .order_by(Employee.id)
            .all()
        )
    except SQLAlchemyError as e:
        report_query_failure(session, "Fetching employees", e)
        return None

    return [
        EmployeeRecord(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            title=row.title,
            department=row.department,
            salary=row.salary,
            manager=_manager_name(row.manager_first_name, row.manager_last_name),
        )
        for row in rows
    ]


def employee_choices(session: Session) -> list[Choice] | None:
    """Reference data for the 'which employee' and 'which manager' prompts."""
    try:
        rows = (
            session.query(Employee.id, Employee.first_name, Employee.last_name)
            .order_by(Employee.id)
            .all()
        )
    except SQLAlchemyError as e:
        report_query_failure(session, "Fetching employees", e)
        return None

    return [Choice(label=f"{row.first_name} {row.last_name}", value=row.id) for row in rows]


# =============================================================================
# --- WRITES ---
# =============================================================================


def create_employee(
    session: Session,
    first_name: str,
    last_name: str,
    role_id: int,
    manager_id: int | None = None,
) -> EmployeeRecord | None:
    """
    Inserts a new employee. Names are stored as typed (empty strings included);
    manager_id None means the employee has no manager.
    """
    try:
        new_employee = Employee(
            first_name=first_name,
            last_name=last_name,
            role_id=role_id,
            manager_id=manager_id,
        )
        session.add(new_employee)
        session.commit()

        role = new_employee.role
        manager = new_employee.manager
        created = EmployeeRecord(
            id=new_employee.id,
            first_name=new_employee.first_name,
            last_name=new_employee.last_name,
            title=role.title if role else None,
            department=role.department.name if role and role.department else None,
            salary=role.salary if role else None,
            manager=manager.full_name if manager else None,
        )
    except SQLAlchemyError as e:
        report_query_failure(
            session,
            "Adding employee",
            e,
            first_name=first_name,
            last_name=last_name,
            role_id=role_id,
            manager_id=manager_id,
        )
        return None

    sentry_sdk.capture_message(
        f"Employee CREATED: {first_name} {last_name} (ID: {created.id}) "
        f"with role ID {role_id}",
        level="info",
    )
    return created


def update_employee_role(session: Session, employee_id: int, role_id: int) -> int | None:
    """
    Assigns role_id to the employee. Assigning the role the employee already
    has simply rewrites it.

    Returns the number of rows updated (0 if the employee no longer exists),
    or None if the statement failed.
    """
    try:
        updated = (
            session.query(Employee)
            .filter(Employee.id == employee_id)
            .update({Employee.role_id: role_id}, synchronize_session=False)
        )
        session.commit()
    except SQLAlchemyError as e:
        report_query_failure(
            session, "Updating employee role", e, employee_id=employee_id, role_id=role_id
        )
        return None

    if updated:
        sentry_sdk.capture_message(
            f"Employee UPDATED: ID {employee_id} assigned role ID {role_id}",
            level="info",
        )
    return updated
