"""
Role Controller: queries and inserts for the Role model.
"""
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import sentry_sdk

from tracker.controllers.utils import report_query_failure
from tracker.models import Department, Role
from tracker.records import Choice, RoleRecord


def list_roles(session: Session) -> list[RoleRecord] | None:
    """
    Retrieves every role together with the name of its department.
    Returns None if the query failed.
    """
    try:
        rows = (
            session.query(Role.id, Role.title, Role.salary, Department.name.label("department"))
            .join(Department, Role.department_id == Department.id)
            .order_by(Role.id)
            .all()
        )
    except SQLAlchemyError as e:
        report_query_failure(session, "Fetching roles", e)
        return None

    return [
        RoleRecord(id=row.id, title=row.title, salary=row.salary, department=row.department)
        for row in rows
    ]


def role_choices(session: Session) -> list[Choice] | None:
    """Reference data for the 'which role' prompts."""
    try:
        rows = session.query(Role.id, Role.title).order_by(Role.id).all()
    except SQLAlchemyError as e:
        report_query_failure(session, "Fetching roles", e)
        return None

    return [Choice(label=row.title, value=row.id) for row in rows]


def create_role(
    session: Session, title: str, salary: Decimal, department_id: int
) -> RoleRecord | None:
    """Inserts a new role in the given department."""
    try:
        role = Role(title=title, salary=salary, department_id=department_id)
        session.add(role)
        session.commit()
        created = RoleRecord(
            id=role.id,
            title=role.title,
            salary=role.salary,
            department=role.department.name if role.department else None,
        )
    except SQLAlchemyError as e:
        report_query_failure(
            session,
            "Adding role",
            e,
            title=title,
            salary=str(salary),
            department_id=department_id,
        )
        return None

    sentry_sdk.capture_message(
        f"Role CREATED: {created.title} (ID: {created.id}) in {created.department}",
        level="info",
    )
    return created
