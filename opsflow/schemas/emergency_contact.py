from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class EmergencyContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    relationship: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=50)
    email: str | None = None
    address: str | None = None
    is_primary: bool = False


class EmergencyContactUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    relationship: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    email: str | None = None
    address: str | None = None
    is_primary: bool | None = None


class EmergencyContactOut(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    name: str
    relationship: str
    phone: str
    email: str | None = None
    address: str | None = None
    is_primary: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
