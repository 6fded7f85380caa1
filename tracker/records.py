"""
Result records returned by the controllers.

Query rows are decoded into these named tuples once, at the controller
boundary, so the views never index into raw rows.
"""
from decimal import Decimal
from typing import Any, NamedTuple, Optional


class DepartmentRecord(NamedTuple):
    id: int
    name: str


class RoleRecord(NamedTuple):
    id: int
    title: str
    salary: Decimal
    department: str


class EmployeeRecord(NamedTuple):
    """One line of the employee report, with role, department and manager resolved."""
    id: int
    first_name: str
    last_name: str
    title: Optional[str]
    department: Optional[str]
    salary: Optional[Decimal]
    manager: Optional[str]


class Choice(NamedTuple):
    """One option of a single-choice prompt: what is shown, and what is returned."""
    label: str
    value: Any
