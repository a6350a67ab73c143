from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocumentFileCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    folder_id: str | None = Field(default=None, validation_alias=AliasChoices("folder_id", "folderId"))
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    file_url: str = Field(..., min_length=1, validation_alias=AliasChoices("file_url", "fileUrl"))
    size: int = Field(default=0, ge=0)
    uploaded_by: str | None = None
    notes: str | None = None


class DocumentFileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    folder_id: str | None = Field(default=None, validation_alias=AliasChoices("folder_id", "folderId"))
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    notes: str | None = None


class DocumentFileOut(BaseModel):
    id: uuid.UUID
    folder_id: uuid.UUID | None = None
    name: str
    type: str
    file_url: str
    size: int
    upload_date: datetime
    uploaded_by: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DocumentBatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: str
    document_ids: list[uuid.UUID] = Field(
        default_factory=list, validation_alias=AliasChoices("document_ids", "documentIds")
    )
    target_folder_id: str | None = Field(
        default=None, validation_alias=AliasChoices("target_folder_id", "targetFolderId")
    )


class DocumentBatchResult(BaseModel):
    message: str
    deleted_count: int | None = None
    moved_count: int | None = None
