"""
Department Controller: queries and inserts for the Department model.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import sentry_sdk

from tracker.controllers.utils import report_query_failure
from tracker.models import Department
from tracker.records import Choice, DepartmentRecord


def list_departments(session: Session) -> list[DepartmentRecord] | None:
    """Retrieves every department. Returns None if the query failed."""
    try:
        rows = session.query(Department.id, Department.name).order_by(Department.id).all()
    except SQLAlchemyError as e:
        report_query_failure(session, "Fetching departments", e)
        return None

    return [DepartmentRecord(id=row.id, name=row.name) for row in rows]


def department_choices(session: Session) -> list[Choice] | None:
    """Reference data for the 'which department' prompt."""
    departments = list_departments(session)
    if departments is None:
        return None
    return [Choice(label=dept.name, value=dept.id) for dept in departments]


def create_department(session: Session, name: str) -> DepartmentRecord | None:
    """
    Inserts a new department. Duplicate names are left for the database to
    accept or reject.
    """
    try:
        department = Department(name=name)
        session.add(department)
        session.commit()
        created = DepartmentRecord(id=department.id, name=department.name)
    except SQLAlchemyError as e:
        report_query_failure(session, "Adding department", e, name=name)
        return None

    sentry_sdk.capture_message(
        f"Department CREATED: {created.name} (ID: {created.id})",
        level="info",
    )
    return created
