from __future__ import annotations

import logging
import uuid
from datetime import date, timedelta

from sqlalchemy.orm import Session, joinedload

from opsflow.core.audit import log_audit
from opsflow.core.errors import NotFoundError
from opsflow.core.expiry import induction_status, utc_today
from opsflow.core.induction_notes import decode_details, encode_details
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.induction import Induction, InductionStatus
from opsflow.repositories.common import get_or_raise
from opsflow.repositories.employees import get_employee
from opsflow.schemas.induction import InductionCreate, InductionProgressUpdate, InductionUpdate, ProgressStatus

logger = logging.getLogger("opsflow.inductions")

PROGRESS_STATUS = {
    ProgressStatus.SCHEDULED: InductionStatus.PENDING,
    ProgressStatus.IN_PROGRESS: InductionStatus.IN_PROGRESS,
    ProgressStatus.COMPLETED: InductionStatus.COMPLETED,
    ProgressStatus.OVERDUE: InductionStatus.EXPIRED,
}


def list_for_employee(db: Session, employee_id: uuid.UUID) -> list[Induction]:
    get_employee(db, employee_id)
    return (
        db.query(Induction)
        .filter(Induction.employee_id == employee_id)
        .order_by(Induction.expiry_date.desc(), Induction.name)
        .all()
    )


def list_expiring(db: Session, days: int, today: date | None = None) -> list[Induction]:
    today = today or utc_today()
    return (
        db.query(Induction)
        .options(joinedload(Induction.employee))
        .filter(
            Induction.expiry_date.isnot(None),
            Induction.expiry_date >= today,
            Induction.expiry_date <= today + timedelta(days=days),
        )
        .order_by(Induction.expiry_date.asc())
        .all()
    )


def get_induction(db: Session, induction_id: uuid.UUID, employee_id: uuid.UUID | None = None) -> Induction:
    induction = get_or_raise(db, Induction, induction_id, "Induction not found")
    if employee_id is not None and induction.employee_id != employee_id:
        raise NotFoundError("Induction not found")
    return induction


def create_induction(
    db: Session, employee_id: uuid.UUID, payload: InductionCreate, actor: str | None = None
) -> Induction:
    get_employee(db, employee_id)
    data = payload.model_dump(exclude={"details"})
    data["notes"] = encode_details(payload.details)
    data["status"] = induction_status(payload.status, payload.expiry_date)
    induction = Induction(employee_id=employee_id, **data)
    db.add(induction)
    db.flush()
    log_audit(db, actor, "CREATE", "induction", induction.id, {"employee_id": employee_id, "name": induction.name})
    gateway.commit(db)
    db.refresh(induction)
    logger.info("Created induction %s for employee %s", induction.id, employee_id)
    return induction


def update_induction(
    db: Session,
    induction_id: uuid.UUID,
    payload: InductionUpdate,
    employee_id: uuid.UUID | None = None,
    actor: str | None = None,
) -> Induction:
    induction = get_induction(db, induction_id, employee_id)
    raw = payload.model_dump(exclude_unset=True)
    details = raw.pop("details", None)
    changes = UpdateSet.for_model(Induction, raw, exclude={"employee_id", "notes"})
    if "details" in payload.model_fields_set:
        if details is None:
            changes = changes.with_value("notes", None)
        else:
            # Merge into what is stored so a partial details object keeps the rest
            merged = decode_details(induction.notes).model_copy(update=details)
            changes = changes.with_value("notes", encode_details(merged))
    if not changes:
        return induction

    stored = changes.get("status") or induction.status
    expiry = changes.get("expiry_date", induction.expiry_date)
    changes = changes.with_value("status", induction_status(stored, expiry))
    changes.apply(induction)
    audit = {k: v for k, v in changes.values.items() if k != "notes"}
    log_audit(db, actor, "UPDATE", "induction", induction.id, audit)
    gateway.commit(db)
    db.refresh(induction)
    return induction


def update_progress(
    db: Session, induction_id: uuid.UUID, payload: InductionProgressUpdate, actor: str | None = None
) -> Induction:
    """Move an induction along the tracker workflow.

    ``progress`` is validated and recorded in the activity log only. Completing
    stamps today as ``completed_date``; an expiry date in the past still wins
    over the requested state.
    """
    induction = get_induction(db, induction_id)
    values = {"status": PROGRESS_STATUS[payload.status]}
    if payload.status == ProgressStatus.COMPLETED:
        values["completed_date"] = utc_today()
    if payload.notes:
        merged = decode_details(induction.notes).model_copy(update={"additional_notes": payload.notes})
        values["notes"] = encode_details(merged)

    changes = UpdateSet.for_model(Induction, values)
    changes = changes.with_value("status", induction_status(values["status"], induction.expiry_date))
    changes.apply(induction)
    audit = {k: v for k, v in changes.values.items() if k != "notes"}
    log_audit(db, actor, "PROGRESS", "induction", induction.id, {**audit, "progress": payload.progress})
    gateway.commit(db)
    db.refresh(induction)
    logger.info("Induction %s at %d%% (%s)", induction.id, payload.progress, induction.status.value)
    return induction


def delete_induction(
    db: Session, induction_id: uuid.UUID, employee_id: uuid.UUID | None = None, actor: str | None = None
) -> None:
    induction = get_induction(db, induction_id, employee_id)
    db.delete(induction)
    log_audit(db, actor, "DELETE", "induction", induction_id, {"employee_id": induction.employee_id})
    gateway.commit(db)
