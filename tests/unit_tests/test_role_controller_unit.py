# tests/unit_tests/test_role_controller_unit.py
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from tracker.controllers.role_controller import create_role, list_roles, role_choices
from tracker.records import Choice, RoleRecord


@pytest.fixture
def mock_session():
    return Mock(spec=Session)


def test_list_roles_decodes_rows(mock_session):
    mock_session.query.return_value.join.return_value.order_by.return_value.all.return_value = [
        SimpleNamespace(id=1, title="Engineer", salary=Decimal("95000"), department="Engineering"),
    ]
    roles = list_roles(mock_session)
    assert roles == [
        RoleRecord(id=1, title="Engineer", salary=Decimal("95000"), department="Engineering")
    ]


def test_list_roles_query_error(mock_session):
    mock_session.query.return_value.join.return_value.order_by.return_value.all.side_effect = (
        OperationalError("SELECT", {}, Exception("lost connection"))
    )
    with patch("tracker.controllers.utils.sentry_sdk.capture_exception") as mock_sentry:
        assert list_roles(mock_session) is None
        assert mock_session.rollback.called
        assert mock_sentry.called


def test_role_choices(mock_session):
    mock_session.query.return_value.order_by.return_value.all.return_value = [
        SimpleNamespace(id=1, title="Engineer"),
        SimpleNamespace(id=2, title="Senior Engineer"),
    ]
    assert role_choices(mock_session) == [
        Choice(label="Engineer", value=1),
        Choice(label="Senior Engineer", value=2),
    ]


def test_create_role_success(mock_session):
    with patch("tracker.controllers.role_controller.sentry_sdk") as mock_sentry:
        role = create_role(mock_session, "Engineer", Decimal("95000.50"), 1)
        assert role is not None
        assert role.title == "Engineer"
        assert role.salary == Decimal("95000.50")
        assert mock_session.commit.called
        assert mock_sentry.capture_message.called


def test_create_role_integrity_error(mock_session):
    mock_session.commit.side_effect = IntegrityError("mock error", {}, None)
    with patch("tracker.controllers.utils.sentry_sdk.capture_exception") as mock_sentry:
        role = create_role(mock_session, "Engineer", Decimal("95000"), 99)
        assert role is None
        assert mock_session.rollback.called
        assert mock_sentry.called
