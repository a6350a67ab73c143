from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Column, Date, DateTime, Enum as SAEnum, String, Uuid
from sqlalchemy.orm import relationship

from opsflow.db.base import Base, utcnow


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"
    PENDING = "Pending"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    position = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True, index=True)
    status = Column(
        SAEnum(EmployeeStatus, name="employee_status", values_callable=enum_values),
        default=EmployeeStatus.ACTIVE,
        nullable=False,
    )
    hire_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    licenses = relationship("License", back_populates="employee", cascade="all, delete-orphan")
    inductions = relationship("Induction", back_populates="employee", cascade="all, delete-orphan")
    documents = relationship("EmployeeDocument", back_populates="employee", cascade="all, delete-orphan")
    emergency_contacts = relationship("EmergencyContact", back_populates="employee", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="assignee")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
