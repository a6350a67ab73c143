from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field


class EmployeeDocumentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    file_url: str = Field(..., min_length=1)
    upload_date: date | None = None
    notes: str | None = None


class EmployeeDocumentUpdate(BaseModel):
    # The stored file itself is immutable; upload a new document instead
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    upload_date: date | None = None
    notes: str | None = None


class EmployeeDocumentOut(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    name: str
    type: str
    file_url: str
    upload_date: date
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
