from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Column, Date, DateTime, Enum as SAEnum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from opsflow.db.base import Base, utcnow
from opsflow.models.employee import enum_values


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(
        SAEnum(TaskPriority, name="task_priority", values_callable=enum_values),
        default=TaskPriority.MEDIUM,
        nullable=False,
    )
    status = Column(
        SAEnum(TaskStatus, name="task_status", values_callable=enum_values),
        default=TaskStatus.PENDING,
        nullable=False,
        index=True,
    )
    due_date = Column(Date, nullable=True)
    # Order within the board column
    position = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    assignee = relationship("Employee", back_populates="tasks")
