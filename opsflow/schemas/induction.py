from __future__ import annotations

import uuid
from datetime import date, datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from opsflow.core.expiry import ExpiryStatus, days_until_expiry, expiry_status, induction_status
from opsflow.core.induction_notes import InductionDetails, decode_details
from opsflow.models.induction import InductionStatus
from opsflow.schemas.employee import EmployeeBrief


class InductionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Older clients send subject/company/due_date
    name: str = Field(..., min_length=1, max_length=255, validation_alias=AliasChoices("name", "subject"))
    provider: str | None = Field(default=None, validation_alias=AliasChoices("provider", "company"))
    completed_date: date | None = None
    expiry_date: date | None = Field(default=None, validation_alias=AliasChoices("expiry_date", "due_date"))
    status: InductionStatus = InductionStatus.PENDING
    details: InductionDetails | None = None


class InductionUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=255, validation_alias=AliasChoices("name", "subject"))
    provider: str | None = Field(default=None, validation_alias=AliasChoices("provider", "company"))
    completed_date: date | None = None
    expiry_date: date | None = Field(default=None, validation_alias=AliasChoices("expiry_date", "due_date"))
    status: InductionStatus | None = None
    details: InductionDetails | None = None


class ProgressStatus(str, Enum):
    """Workflow states as the induction tracker UI names them."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class InductionProgressUpdate(BaseModel):
    progress: int = Field(..., ge=0, le=100)
    status: ProgressStatus
    # Free text, kept as details.additional_notes
    notes: str | None = None


class InductionOut(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    name: str
    provider: str | None = None
    completed_date: date | None = None
    expiry_date: date | None = None
    status: InductionStatus
    notes: str | None = Field(default=None, exclude=True)
    details: InductionDetails = Field(default_factory=InductionDetails)
    days_until_expiry: int | None = None
    expiry_status: ExpiryStatus | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def _derive_fields(self) -> "InductionOut":
        if self.notes is not None:
            self.details = decode_details(self.notes)
        self.status = induction_status(self.status, self.expiry_date)
        if self.expiry_date is not None:
            self.days_until_expiry = days_until_expiry(self.expiry_date)
            self.expiry_status = expiry_status(self.expiry_date)
        return self


class InductionWithEmployeeOut(InductionOut):
    employee: EmployeeBrief | None = None
