from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from opsflow.core.expiry import ExpiryStatus, days_until_expiry, expiry_status, license_status
from opsflow.models.license import LicenseStatus
from opsflow.schemas.employee import EmployeeBrief


class LicenseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    license_number: str | None = Field(default=None, max_length=100)
    issuing_authority: str | None = None
    issue_date: date
    expiry_date: date
    document_url: str | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> "LicenseCreate":
        if self.expiry_date < self.issue_date:
            raise ValueError("expiry_date must not be before issue_date")
        return self


class LicenseUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    license_number: str | None = Field(default=None, max_length=100)
    issuing_authority: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    document_url: str | None = None
    notes: str | None = None
    # Only "Renewal Pending" sticks, the other values are derived from expiry_date
    status: LicenseStatus | None = None


class LicenseOut(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    name: str
    license_number: str | None = None
    issuing_authority: str | None = None
    issue_date: date
    expiry_date: date
    status: LicenseStatus
    document_url: str | None = None
    notes: str | None = None
    days_until_expiry: int | None = None
    expiry_status: ExpiryStatus | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def _derive_status(self) -> "LicenseOut":
        # Recomputed on every read, the stored value may be stale. A pending
        # renewal is kept until the license actually expires
        self.days_until_expiry = days_until_expiry(self.expiry_date)
        self.expiry_status = expiry_status(self.expiry_date)
        self.status = license_status(self.expiry_date, stored=self.status)
        return self


class LicenseWithEmployeeOut(LicenseOut):
    employee: EmployeeBrief | None = None
