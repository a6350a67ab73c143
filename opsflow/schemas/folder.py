from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class FolderCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=255)
    description: str | None = None
    # Anything that is not a UUID (including "root") means a top-level folder
    parent_id: str | None = Field(default=None, validation_alias=AliasChoices("parent_id", "parentId"))


class FolderUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    parent_id: str | None = Field(default=None, validation_alias=AliasChoices("parent_id", "parentId"))


class FolderOut(BaseModel):
    id: uuid.UUID
    name: str
    parent_id: uuid.UUID | None = None
    path: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
