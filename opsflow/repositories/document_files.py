from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time, timedelta, timezone
from typing import Sequence

from sqlalchemy import delete, func, or_, update
from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.errors import ReferenceNotFoundError, ValidationError
from opsflow.db import gateway
from opsflow.db.base import utcnow
from opsflow.db.updates import UpdateSet
from opsflow.models.document_file import DocumentFile
from opsflow.models.folder import Folder
from opsflow.repositories.common import LIKE_ESCAPE, contains_pattern, get_or_raise, parse_folder_ref
from opsflow.schemas.document_file import DocumentFileCreate, DocumentFileUpdate

logger = logging.getLogger("opsflow.documents")

ROOT_FOLDER = "root"


def _resolve_folder(db: Session, folder_ref: str | None) -> uuid.UUID | None:
    folder_id = parse_folder_ref(folder_ref)
    if folder_id is None:
        return None
    return get_or_raise(db, Folder, folder_id, "Folder not found", ReferenceNotFoundError).id


def _filter_folder(query, folder_ref: str | None):
    if folder_ref is None or folder_ref == "":
        return query
    folder_id = parse_folder_ref(folder_ref)
    if folder_id is None:
        # "root" (or anything that is not a folder id) lists unfiled documents
        return query.filter(DocumentFile.folder_id.is_(None))
    return query.filter(DocumentFile.folder_id == folder_id)


def list_documents(db: Session, folder_ref: str | None = None, search: str | None = None) -> list[DocumentFile]:
    query = _filter_folder(db.query(DocumentFile), folder_ref)
    if search:
        query = query.filter(func.lower(DocumentFile.name).like(contains_pattern(search), escape=LIKE_ESCAPE))
    return query.order_by(DocumentFile.upload_date.desc()).all()


def search_documents(
    db: Session,
    q: str,
    folder_ref: str | None = None,
    doc_type: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[DocumentFile]:
    if not (q or "").strip():
        raise ValidationError("Search query is required")
    pattern = contains_pattern(q)
    query = db.query(DocumentFile).filter(
        or_(
            func.lower(DocumentFile.name).like(pattern, escape=LIKE_ESCAPE),
            func.lower(DocumentFile.type).like(pattern, escape=LIKE_ESCAPE),
            func.lower(DocumentFile.notes).like(pattern, escape=LIKE_ESCAPE),
        )
    )
    query = _filter_folder(query, folder_ref)
    if doc_type:
        query = query.filter(DocumentFile.type == doc_type)
    if date_from:
        query = query.filter(DocumentFile.upload_date >= datetime.combine(date_from, time.min, tzinfo=timezone.utc))
    if date_to:
        # Inclusive of the whole end day
        end = datetime.combine(date_to + timedelta(days=1), time.min, tzinfo=timezone.utc)
        query = query.filter(DocumentFile.upload_date < end)
    return query.order_by(DocumentFile.upload_date.desc()).all()


def get_document(db: Session, document_id: uuid.UUID) -> DocumentFile:
    return get_or_raise(db, DocumentFile, document_id, "Document not found")


def create_document(db: Session, payload: DocumentFileCreate, actor: str | None = None) -> DocumentFile:
    data = payload.model_dump()
    data["folder_id"] = _resolve_folder(db, data["folder_id"])
    if not data.get("uploaded_by"):
        data["uploaded_by"] = actor
    document = DocumentFile(**data)
    db.add(document)
    db.flush()
    log_audit(db, actor, "CREATE", "document", document.id, {"name": document.name, "folder_id": document.folder_id})
    gateway.commit(db)
    db.refresh(document)
    return document


def update_document(
    db: Session, document_id: uuid.UUID, payload: DocumentFileUpdate, actor: str | None = None
) -> DocumentFile:
    document = get_document(db, document_id)
    raw = payload.model_dump(exclude_unset=True)
    if "folder_id" in raw:
        raw["folder_id"] = _resolve_folder(db, raw["folder_id"])
    changes = UpdateSet.for_model(DocumentFile, raw)
    if not changes:
        return document
    changes.apply(document)
    log_audit(db, actor, "UPDATE", "document", document.id, changes.values)
    gateway.commit(db)
    db.refresh(document)
    return document


def delete_document(db: Session, document_id: uuid.UUID, actor: str | None = None) -> None:
    document = get_document(db, document_id)
    db.delete(document)
    log_audit(db, actor, "DELETE", "document", document_id, {"name": document.name})
    gateway.commit(db)


def _require_ids(document_ids: Sequence[uuid.UUID]) -> list[uuid.UUID]:
    ids = list(dict.fromkeys(document_ids))
    if not ids:
        raise ValidationError("Document IDs are required")
    return ids


def batch_delete(db: Session, document_ids: Sequence[uuid.UUID], actor: str | None = None) -> int:
    ids = _require_ids(document_ids)
    stmt = delete(DocumentFile).where(DocumentFile.id.in_(ids)).execution_options(synchronize_session=False)
    deleted = gateway.execute(db, stmt).rowcount
    log_audit(db, actor, "BATCH_DELETE", "document", None, {"ids": ids, "deleted": deleted})
    gateway.commit(db)
    logger.info("Batch deleted %d of %d documents", deleted, len(ids))
    return deleted


def batch_move(
    db: Session, document_ids: Sequence[uuid.UUID], target_folder: str | None, actor: str | None = None
) -> int:
    ids = _require_ids(document_ids)
    if not target_folder:
        raise ValidationError("Target folder ID is required for move action")
    # "root" unfiles the documents; any other value must name an existing folder
    if target_folder == ROOT_FOLDER:
        folder_id = None
    else:
        try:
            folder_id = uuid.UUID(str(target_folder))
        except ValueError:
            raise ReferenceNotFoundError("Target folder not found") from None
        get_or_raise(db, Folder, folder_id, "Target folder not found", ReferenceNotFoundError)

    stmt = (
        update(DocumentFile)
        .where(DocumentFile.id.in_(ids))
        .values(folder_id=folder_id, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    moved = gateway.execute(db, stmt).rowcount
    log_audit(db, actor, "BATCH_MOVE", "document", None, {"ids": ids, "folder_id": folder_id, "moved": moved})
    gateway.commit(db)
    logger.info("Batch moved %d of %d documents to %s", moved, len(ids), folder_id or ROOT_FOLDER)
    return moved
