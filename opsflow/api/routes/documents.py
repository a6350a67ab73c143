import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.core.errors import ValidationError
from opsflow.repositories import document_files as repo
from opsflow.schemas.document_file import (
    DocumentBatchRequest,
    DocumentBatchResult,
    DocumentFileCreate,
    DocumentFileOut,
    DocumentFileUpdate,
)

router = APIRouter()


@router.get("", response_model=list[DocumentFileOut])
def list_documents(
    folder_id: str | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
) -> list[DocumentFileOut]:
    return repo.list_documents(db, folder_id, search)


@router.post("", response_model=DocumentFileOut, status_code=201)
def create_document(payload: DocumentFileCreate, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> DocumentFileOut:
    return repo.create_document(db, payload, actor)


@router.get("/search", response_model=list[DocumentFileOut])
def search_documents(
    q: str = Query(default=""),
    folder_id: str | None = None,
    type: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    db: Session = Depends(get_db),
) -> list[DocumentFileOut]:
    return repo.search_documents(db, q, folder_id, type, date_from, date_to)


@router.post("/batch", response_model=DocumentBatchResult, response_model_exclude_none=True)
def batch_documents(
    payload: DocumentBatchRequest,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> DocumentBatchResult:
    if payload.action == "delete":
        deleted = repo.batch_delete(db, payload.document_ids, actor)
        return DocumentBatchResult(message=f"{deleted} documents deleted successfully", deleted_count=deleted)
    if payload.action == "move":
        moved = repo.batch_move(db, payload.document_ids, payload.target_folder_id, actor)
        return DocumentBatchResult(message=f"{moved} documents moved successfully", moved_count=moved)
    raise ValidationError("Invalid action")


@router.get("/{document_id}", response_model=DocumentFileOut)
def get_document(document_id: uuid.UUID, db: Session = Depends(get_db)) -> DocumentFileOut:
    return repo.get_document(db, document_id)


@router.api_route("/{document_id}", methods=["PUT", "PATCH"], response_model=DocumentFileOut)
def update_document(
    document_id: uuid.UUID,
    payload: DocumentFileUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> DocumentFileOut:
    return repo.update_document(db, document_id, payload, actor)


@router.delete("/{document_id}")
def delete_document(document_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_document(db, document_id, actor)
    return {"message": "Document deleted successfully"}
