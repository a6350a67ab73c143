from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from opsflow.models.task import TaskPriority, TaskStatus
from opsflow.schemas.employee import EmployeeBrief


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    employee_id: uuid.UUID | None = None
    due_date: date | None = None
    position: int = Field(default=0, ge=0)


class TaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    employee_id: uuid.UUID | None = None
    due_date: date | None = None
    position: int | None = Field(default=None, ge=0)


class TaskOut(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None = None
    priority: TaskPriority
    status: TaskStatus
    employee_id: uuid.UUID | None = None
    assignee: EmployeeBrief | None = None
    due_date: date | None = None
    position: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TaskBoardOut(BaseModel):
    pending: list[TaskOut] = Field(default_factory=list)
    in_progress: list[TaskOut] = Field(default_factory=list)
    review: list[TaskOut] = Field(default_factory=list)
    completed: list[TaskOut] = Field(default_factory=list)
