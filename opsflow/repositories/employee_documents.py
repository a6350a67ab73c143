from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.errors import NotFoundError
from opsflow.core.expiry import utc_today
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.employee_document import EmployeeDocument
from opsflow.repositories.common import get_or_raise
from opsflow.repositories.employees import get_employee
from opsflow.schemas.employee_document import EmployeeDocumentCreate, EmployeeDocumentUpdate


def list_for_employee(db: Session, employee_id: uuid.UUID) -> list[EmployeeDocument]:
    get_employee(db, employee_id)
    return (
        db.query(EmployeeDocument)
        .filter(EmployeeDocument.employee_id == employee_id)
        .order_by(EmployeeDocument.upload_date.desc(), EmployeeDocument.name)
        .all()
    )


def get_document(db: Session, employee_id: uuid.UUID, document_id: uuid.UUID) -> EmployeeDocument:
    document = get_or_raise(db, EmployeeDocument, document_id, "Document not found")
    if document.employee_id != employee_id:
        raise NotFoundError("Document not found")
    return document


def create_document(
    db: Session, employee_id: uuid.UUID, payload: EmployeeDocumentCreate, actor: str | None = None
) -> EmployeeDocument:
    get_employee(db, employee_id)
    data = payload.model_dump()
    data["upload_date"] = data["upload_date"] or utc_today()
    document = EmployeeDocument(employee_id=employee_id, **data)
    db.add(document)
    db.flush()
    log_audit(db, actor, "CREATE", "employee_document", document.id, {"employee_id": employee_id, "name": document.name})
    gateway.commit(db)
    db.refresh(document)
    return document


def update_document(
    db: Session,
    employee_id: uuid.UUID,
    document_id: uuid.UUID,
    payload: EmployeeDocumentUpdate,
    actor: str | None = None,
) -> EmployeeDocument:
    document = get_document(db, employee_id, document_id)
    changes = UpdateSet.for_model(EmployeeDocument, payload, exclude={"employee_id", "file_url"})
    if not changes:
        return document
    changes.apply(document)
    log_audit(db, actor, "UPDATE", "employee_document", document.id, changes.values)
    gateway.commit(db)
    db.refresh(document)
    return document


def delete_document(db: Session, employee_id: uuid.UUID, document_id: uuid.UUID, actor: str | None = None) -> None:
    document = get_document(db, employee_id, document_id)
    db.delete(document)
    log_audit(db, actor, "DELETE", "employee_document", document_id, {"employee_id": employee_id})
    gateway.commit(db)
