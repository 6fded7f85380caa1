# tests/conftest.py
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracker.models import Base, Department, Employee, Role


@pytest.fixture
def test_engine():
    # One shared connection, so every session sees the same in-memory database.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine)


@pytest.fixture
def test_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def engineering(test_session):
    department = Department(name="Engineering")
    test_session.add(department)
    test_session.commit()
    return department


@pytest.fixture
def engineer_role(test_session, engineering):
    role = Role(title="Engineer", salary=Decimal("95000"), department_id=engineering.id)
    test_session.add(role)
    test_session.commit()
    return role


@pytest.fixture
def senior_engineer_role(test_session, engineering):
    role = Role(title="Senior Engineer", salary=Decimal("125000"), department_id=engineering.id)
    test_session.add(role)
    test_session.commit()
    return role


@pytest.fixture
def ada(test_session, engineer_role):
    employee = Employee(first_name="Ada", last_name="Lovelace", role_id=engineer_role.id)
    test_session.add(employee)
    test_session.commit()
    return employee
