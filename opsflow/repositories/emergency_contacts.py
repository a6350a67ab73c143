"""Emergency contacts and the one-primary-per-employee rule.

Promoting a contact first clears the flag on the employee's other contacts
with a single UPDATE, then writes the promoted row, all in one transaction.
The partial unique index ``uq_emergency_contacts_one_primary`` backs this up
on the database side.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import update
from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.errors import NotFoundError, ValidationError
from opsflow.db import gateway
from opsflow.db.base import utcnow
from opsflow.db.updates import UpdateSet
from opsflow.models.emergency_contact import EmergencyContact
from opsflow.repositories.common import get_or_raise
from opsflow.repositories.employees import get_employee
from opsflow.schemas.emergency_contact import EmergencyContactCreate, EmergencyContactUpdate

logger = logging.getLogger("opsflow.contacts")

PRIMARY_CONFLICT = "Only one primary emergency contact is allowed per employee"


def list_for_employee(db: Session, employee_id: uuid.UUID) -> list[EmergencyContact]:
    get_employee(db, employee_id)
    return (
        db.query(EmergencyContact)
        .filter(EmergencyContact.employee_id == employee_id)
        .order_by(EmergencyContact.is_primary.desc(), EmergencyContact.name)
        .all()
    )


def get_contact(db: Session, employee_id: uuid.UUID, contact_id: uuid.UUID) -> EmergencyContact:
    contact = get_or_raise(db, EmergencyContact, contact_id, "Emergency contact not found")
    if contact.employee_id != employee_id:
        raise NotFoundError("Emergency contact not found")
    return contact


def _clear_primary(db: Session, employee_id: uuid.UUID, keep_id: uuid.UUID | None = None) -> int:
    stmt = (
        update(EmergencyContact)
        .where(EmergencyContact.employee_id == employee_id, EmergencyContact.is_primary.is_(True))
        .values(is_primary=False, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    if keep_id is not None:
        stmt = stmt.where(EmergencyContact.id != keep_id)
    return gateway.execute(db, stmt).rowcount


def _other_primary_count(db: Session, employee_id: uuid.UUID, contact_id: uuid.UUID) -> int:
    return (
        db.query(EmergencyContact)
        .filter(
            EmergencyContact.employee_id == employee_id,
            EmergencyContact.is_primary.is_(True),
            EmergencyContact.id != contact_id,
        )
        .count()
    )


def create_contact(
    db: Session, employee_id: uuid.UUID, payload: EmergencyContactCreate, actor: str | None = None
) -> EmergencyContact:
    get_employee(db, employee_id)
    if payload.is_primary:
        cleared = _clear_primary(db, employee_id)
        if cleared:
            logger.info("Demoted %d primary contact(s) of employee %s", cleared, employee_id)
    contact = EmergencyContact(employee_id=employee_id, **payload.model_dump())
    db.add(contact)
    db.flush()
    log_audit(db, actor, "CREATE", "emergency_contact", contact.id, {"employee_id": employee_id, "is_primary": contact.is_primary})
    gateway.commit(db, PRIMARY_CONFLICT)
    db.refresh(contact)
    return contact


def update_contact(
    db: Session,
    employee_id: uuid.UUID,
    contact_id: uuid.UUID,
    payload: EmergencyContactUpdate,
    actor: str | None = None,
) -> EmergencyContact:
    contact = get_contact(db, employee_id, contact_id)
    changes = UpdateSet.for_model(EmergencyContact, payload, exclude={"employee_id"})
    if not changes:
        return contact

    make_primary = changes.get("is_primary")
    if make_primary and not contact.is_primary:
        _clear_primary(db, employee_id, keep_id=contact.id)
    elif make_primary is False and contact.is_primary:
        if not _other_primary_count(db, employee_id, contact.id):
            raise ValidationError("Cannot unset the only primary contact")

    changes.apply(contact)
    log_audit(db, actor, "UPDATE", "emergency_contact", contact.id, changes.values)
    gateway.commit(db, PRIMARY_CONFLICT)
    db.refresh(contact)
    return contact


def delete_contact(db: Session, employee_id: uuid.UUID, contact_id: uuid.UUID, actor: str | None = None) -> None:
    contact = get_contact(db, employee_id, contact_id)
    if contact.is_primary and not _other_primary_count(db, employee_id, contact.id):
        raise ValidationError("Cannot delete the only primary contact")
    db.delete(contact)
    log_audit(db, actor, "DELETE", "emergency_contact", contact_id, {"employee_id": employee_id})
    gateway.commit(db)
