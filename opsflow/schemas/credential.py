from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from opsflow.models.credential import CredentialStatus, PasswordStrength


class CredentialCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    url: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    expiration_date: date | None = None
    status: CredentialStatus = CredentialStatus.ACTIVE


class CredentialUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    username: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=1)
    url: str | None = None
    notes: str | None = None
    tags: list[str] | None = None
    expiration_date: date | None = None
    status: CredentialStatus | None = None


class CredentialOut(BaseModel):
    id: uuid.UUID
    name: str
    category: str
    username: str
    password: str
    url: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    expiration_date: date | None = None
    status: CredentialStatus
    strength: PasswordStrength
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class CredentialCategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class CredentialCategoryOut(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True
