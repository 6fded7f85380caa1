# tests/unit_tests/test_utils_unit.py
from decimal import Decimal
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.controllers.utils import is_valid_salary, parse_salary, report_query_failure


@pytest.mark.parametrize("text, expected", [
    ("95000", Decimal("95000")),
    ("95000.50", Decimal("95000.50")),
    ("  42 ", Decimal("42")),
    ("0", Decimal("0")),
    ("95000.500", Decimal("95000.5")),
    ("99999999.99", Decimal("99999999.99")),
])
def test_parse_salary_accepts_numbers(text, expected):
    assert parse_salary(text) == expected


@pytest.mark.parametrize("text", [
    "abc", "", "12abc", "-1", "NaN", "Infinity",
    "95000.555", "1e20", "123456789012", "100000000",
])
def test_parse_salary_rejects_garbage(text):
    assert parse_salary(text) is None


def test_is_valid_salary():
    assert is_valid_salary("95000") is True
    assert is_valid_salary("95000.50") is True
    assert is_valid_salary("abc") is False


def test_report_query_failure_rolls_back_and_reports(capsys):
    mock_session = Mock(spec=Session)
    error = SQLAlchemyError("connection lost")

    with patch("tracker.controllers.utils.sentry_sdk") as mock_sentry:
        report_query_failure(mock_session, "Adding role", error, title="Engineer")

    assert mock_session.rollback.called
    mock_sentry.capture_exception.assert_called_once_with(error)
    mock_sentry.set_context.assert_any_call(
        "query_failure", {"action": "Adding role", "title": "Engineer"}
    )
    out = capsys.readouterr().out
    assert "ERROR:" in out
    assert "Adding role failed" in out


def test_report_query_failure_escapes_markup(capsys):
    mock_session = Mock(spec=Session)
    error = SQLAlchemyError("[/bold] is not a closing tag")

    report_query_failure(mock_session, "Fetching roles", error)

    assert "[/bold] is not a closing tag" in capsys.readouterr().out
