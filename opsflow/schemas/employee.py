from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from opsflow.models.employee import EmployeeStatus


class EmployeeCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = None
    position: str | None = None
    department: str | None = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    hire_date: date | None = None


class EmployeeUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = None
    position: str | None = None
    department: str | None = None
    status: EmployeeStatus | None = None
    hire_date: date | None = None


class EmployeeOut(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    position: str | None = None
    department: str | None = None
    status: EmployeeStatus
    hire_date: date | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EmployeeBrief(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    position: str | None = None

    class Config:
        from_attributes = True
