from __future__ import annotations

import logging
import uuid
from datetime import date, timedelta
from typing import NamedTuple

from sqlalchemy.orm import Session, joinedload

from opsflow.core.audit import log_audit
from opsflow.core.config import settings
from opsflow.core.errors import NotFoundError, ValidationError
from opsflow.core.expiry import license_status, utc_today
from opsflow.core.storage import StorageClient, StorageError
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.license import License, LicenseStatus
from opsflow.repositories.common import get_or_raise
from opsflow.repositories.employees import get_employee
from opsflow.schemas.license import LicenseCreate, LicenseUpdate

logger = logging.getLogger("opsflow.licenses")


class UploadedDocument(NamedTuple):
    filename: str
    content: bytes
    content_type: str | None = None


def list_licenses(
    db: Session,
    employee_id: uuid.UUID | None = None,
    status: LicenseStatus | None = None,
    today: date | None = None,
) -> list[License]:
    today = today or utc_today()
    horizon = today + timedelta(days=settings.EXPIRY_WARNING_DAYS)
    query = db.query(License).options(joinedload(License.employee))
    if employee_id is not None:
        query = query.filter(License.employee_id == employee_id)
    # Same boundaries as opsflow.core.expiry.classify, evaluated in SQL
    if status == LicenseStatus.EXPIRED:
        query = query.filter(License.expiry_date < today)
    elif status == LicenseStatus.EXPIRING_SOON:
        query = query.filter(
            License.expiry_date >= today,
            License.expiry_date <= horizon,
            License.status != LicenseStatus.RENEWAL_PENDING,
        )
    elif status == LicenseStatus.VALID:
        query = query.filter(License.expiry_date > horizon, License.status != LicenseStatus.RENEWAL_PENDING)
    elif status == LicenseStatus.RENEWAL_PENDING:
        query = query.filter(License.status == LicenseStatus.RENEWAL_PENDING, License.expiry_date >= today)
    return query.order_by(License.expiry_date.asc()).all()


def list_expiring(db: Session, days: int, today: date | None = None) -> list[License]:
    """Licenses whose expiry falls within the next ``days`` days, today included."""
    today = today or utc_today()
    return (
        db.query(License)
        .options(joinedload(License.employee))
        .filter(License.expiry_date >= today, License.expiry_date <= today + timedelta(days=days))
        .order_by(License.expiry_date.asc())
        .all()
    )


def list_for_employee(db: Session, employee_id: uuid.UUID) -> list[License]:
    get_employee(db, employee_id)
    return (
        db.query(License)
        .filter(License.employee_id == employee_id)
        .order_by(License.expiry_date.desc())
        .all()
    )


def get_license(db: Session, license_id: uuid.UUID, employee_id: uuid.UUID | None = None) -> License:
    license_ = get_or_raise(db, License, license_id, "License not found")
    if employee_id is not None and license_.employee_id != employee_id:
        raise NotFoundError("License not found")
    return license_


def create_license(
    db: Session, employee_id: uuid.UUID, payload: LicenseCreate, actor: str | None = None
) -> License:
    get_employee(db, employee_id)
    license_ = License(employee_id=employee_id, **payload.model_dump())
    license_.status = license_status(license_.expiry_date)
    db.add(license_)
    db.flush()
    log_audit(db, actor, "CREATE", "license", license_.id, {"employee_id": employee_id, "name": license_.name})
    gateway.commit(db)
    db.refresh(license_)
    logger.info("Created license %s for employee %s", license_.id, employee_id)
    return license_


def update_license(
    db: Session,
    license_id: uuid.UUID,
    payload: LicenseUpdate,
    employee_id: uuid.UUID | None = None,
    actor: str | None = None,
) -> License:
    license_ = get_license(db, license_id, employee_id)
    changes = UpdateSet.for_model(License, payload, exclude={"employee_id"})
    if not changes:
        return license_
    issue_date = changes.get("issue_date", license_.issue_date)
    expiry_date = changes.get("expiry_date", license_.expiry_date)
    if expiry_date < issue_date:
        raise ValidationError("expiry_date must not be before issue_date")
    stored = changes.get("status", license_.status)
    changes = changes.with_value("status", license_status(expiry_date, stored=stored))
    changes.apply(license_)
    log_audit(db, actor, "UPDATE", "license", license_.id, changes.values)
    gateway.commit(db)
    db.refresh(license_)
    return license_


def renew_license(
    db: Session,
    license_id: uuid.UUID,
    expiry_date: date,
    storage: StorageClient,
    document: UploadedDocument | None = None,
    actor: str | None = None,
) -> License:
    license_ = get_license(db, license_id)
    if expiry_date < license_.issue_date:
        raise ValidationError("expiry_date must not be before issue_date")

    changes = {"expiry_date": expiry_date, "status": license_status(expiry_date)}
    if document is not None and document.content:
        try:
            changes["document_url"] = storage.upload(
                document.filename, document.content, document.content_type, prefix="licenses"
            )
        except StorageError as exc:
            # Renewal still goes through, the old document URL is kept
            logger.warning("License %s renewal document upload failed: %s", license_id, exc)

    UpdateSet.for_model(License, changes).apply(license_)
    log_audit(db, actor, "RENEW", "license", license_.id, changes)
    gateway.commit(db)
    db.refresh(license_)
    logger.info("Renewed license %s until %s", license_id, expiry_date)
    return license_


def delete_license(
    db: Session, license_id: uuid.UUID, employee_id: uuid.UUID | None = None, actor: str | None = None
) -> None:
    license_ = get_license(db, license_id, employee_id)
    db.delete(license_)
    log_audit(db, actor, "DELETE", "license", license_id, {"employee_id": license_.employee_id})
    gateway.commit(db)
