"""
Database Models for the Employee Tracker application.

Defines the SQLAlchemy structure for Departments, Roles and Employees.
The engine itself is built at startup (see tracker.database) and is never
created at import time.
"""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


# --- DEPARTMENT ---
class Department(Base):
    """Represents a department (Engineering, Sales, ...)."""
    __tablename__ = "department"
    id = Column(Integer, primary_key=True)
    name = Column(String(30), nullable=False)

    roles = relationship("Role", back_populates="department")

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}')>"


# --- ROLE ---
class Role(Base):
    """Represents a job title with its salary, owned by a department."""
    __tablename__ = "role"
    id = Column(Integer, primary_key=True)
    title = Column(String(30), nullable=False)
    salary = Column(Numeric(10, 2), nullable=False)
    department_id = Column(Integer, ForeignKey("department.id"), nullable=False)

    # Relationships
    department = relationship("Department", back_populates="roles")
    employees = relationship("Employee", back_populates="role")

    def __repr__(self):
        return f"<Role(id={self.id}, title='{self.title}', department_id={self.department_id})>"


# --- EMPLOYEE ---
class Employee(Base):
    """Represents an employee. The manager is another employee (or nobody)."""
    __tablename__ = "employee"
    id = Column(Integer, primary_key=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=False)
    manager_id = Column(
        Integer, ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    role = relationship("Role", back_populates="employees")
    manager = relationship("Employee", remote_side=[id])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.full_name}', role_id={self.role_id})>"
