"""
Sample data for a fresh database.

Only runs against an empty store: if any department already exists nothing
is inserted.
"""
from decimal import Decimal

from rich.console import Console
from sqlalchemy.orm import Session

from tracker.models import Department, Employee, Role

console = Console()

SAMPLE_DEPARTMENTS = ["Engineering", "Finance", "Legal", "Sales"]

# (title, salary, department)
SAMPLE_ROLES = [
    ("Lead Engineer", Decimal("150000"), "Engineering"),
    ("Software Engineer", Decimal("120000"), "Engineering"),
    ("Account Manager", Decimal("160000"), "Finance"),
    ("Accountant", Decimal("125000"), "Finance"),
    ("Legal Team Lead", Decimal("250000"), "Legal"),
    ("Lawyer", Decimal("190000"), "Legal"),
    ("Sales Lead", Decimal("100000"), "Sales"),
    ("Salesperson", Decimal("80000"), "Sales"),
]

# (first name, last name, role title, manager full name)
SAMPLE_EMPLOYEES = [
    ("John", "Doe", "Sales Lead", None),
    ("Mike", "Chan", "Salesperson", "John Doe"),
    ("Ashley", "Rodriguez", "Lead Engineer", None),
    ("Kevin", "Tupik", "Software Engineer", "Ashley Rodriguez"),
    ("Kunal", "Singh", "Account Manager", None),
    ("Malia", "Brown", "Accountant", "Kunal Singh"),
    ("Sarah", "Lourd", "Legal Team Lead", None),
    ("Tom", "Allen", "Lawyer", "Sarah Lourd"),
]


def seed_sample_data(session: Session) -> bool:
    """
    Inserts the sample departments, roles and employees.
    Returns True if data was inserted, False if the store was not empty.
    """
    if session.query(Department).first() is not None:
        console.print("[bold yellow]INFO:[/bold yellow] Database already has data, skipping seed.")
        return False

    try:
        departments = {name: Department(name=name) for name in SAMPLE_DEPARTMENTS}
        session.add_all(departments.values())

        roles = {
            title: Role(title=title, salary=salary, department=departments[dept])
            for title, salary, dept in SAMPLE_ROLES
        }
        session.add_all(roles.values())

        employees = {}
        for first_name, last_name, title, manager_name in SAMPLE_EMPLOYEES:
            employee = Employee(
                first_name=first_name,
                last_name=last_name,
                role=roles[title],
                manager=employees.get(manager_name),
            )
            employees[employee.full_name] = employee
        session.add_all(employees.values())

        session.commit()
    except Exception:
        session.rollback()
        raise

    console.print(
        f"[bold green]Sample data created:[/bold green] {len(departments)} departments, "
        f"{len(roles)} roles, {len(employees)} employees."
    )
    return True
