"""
Utility functions used across controllers and views for validation and helpers.
"""
from decimal import Decimal, InvalidOperation

import sentry_sdk
from rich.console import Console
from rich.markup import escape
from sqlalchemy.orm import Session

console = Console()


# Role.salary is Numeric(10, 2): at most 8 integer digits and 2 decimals.
MAX_SALARY = Decimal("1e8")
CENT = Decimal("0.01")


def parse_salary(salary: str) -> Decimal | None:
    """
    Parses salary text into a Decimal.
    Returns None for anything that is not a finite, non-negative number that
    fits the salary column without rounding.
    """
    try:
        value = Decimal(salary.strip())
    except (InvalidOperation, AttributeError):
        return None

    if not value.is_finite() or value < 0 or value >= MAX_SALARY:
        return None
    if value != value.quantize(CENT):
        return None
    return value


def is_valid_salary(salary: str) -> bool:
    """Accepts '95000' or '95000.50', rejects 'abc'."""
    return parse_salary(salary) is not None


def report_query_failure(session: Session, action: str, error: Exception, **context) -> None:
    """
    Rolls back the session, sends the error to Sentry with the action context
    and prints it for the operator.
    """
    session.rollback()
    sentry_sdk.set_context("query_failure", {"action": action, **context})
    sentry_sdk.capture_exception(error)
    sentry_sdk.set_context("query_failure", {})
    console.print(f"[bold red]ERROR:[/bold red] {action} failed: {escape(str(error))}")
