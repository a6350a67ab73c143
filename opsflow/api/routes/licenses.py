import uuid
from datetime import date

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from opsflow.core.config import settings
from opsflow.core.deps import get_actor, get_db
from opsflow.core.errors import ValidationError
from opsflow.core.storage import StorageClient, get_storage
from opsflow.models.license import LicenseStatus
from opsflow.repositories import licenses as repo
from opsflow.repositories.licenses import UploadedDocument
from opsflow.schemas.license import LicenseOut, LicenseUpdate, LicenseWithEmployeeOut

router = APIRouter()


@router.get("", response_model=list[LicenseWithEmployeeOut])
def list_licenses(
    employee_id: uuid.UUID | None = None,
    status: LicenseStatus | None = None,
    db: Session = Depends(get_db),
) -> list[LicenseWithEmployeeOut]:
    return repo.list_licenses(db, employee_id=employee_id, status=status)


@router.get("/expiring", response_model=list[LicenseWithEmployeeOut])
def list_expiring_licenses(
    days: int = Query(default=settings.EXPIRY_WARNING_DAYS, ge=0, le=3650),
    db: Session = Depends(get_db),
) -> list[LicenseWithEmployeeOut]:
    return repo.list_expiring(db, days)


@router.get("/{license_id}", response_model=LicenseWithEmployeeOut)
def get_license(license_id: uuid.UUID, db: Session = Depends(get_db)) -> LicenseWithEmployeeOut:
    return repo.get_license(db, license_id)


@router.api_route("/{license_id}", methods=["PUT", "PATCH"], response_model=LicenseOut)
def update_license(
    license_id: uuid.UUID,
    payload: LicenseUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> LicenseOut:
    return repo.update_license(db, license_id, payload, actor=actor)


@router.delete("/{license_id}")
def delete_license(license_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_license(db, license_id, actor=actor)
    return {"message": "License deleted successfully"}


@router.post("/{license_id}/renew", response_model=LicenseOut)
def renew_license(
    license_id: uuid.UUID,
    expiry_date: date | None = Form(default=None),
    expiry_date_camel: date | None = Form(default=None, alias="expiryDate"),
    document: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
    actor: str | None = Depends(get_actor),
) -> LicenseOut:
    expiry_date = expiry_date or expiry_date_camel
    if expiry_date is None:
        raise ValidationError("expiry_date: Field required")
    upload = None
    if document is not None and document.filename:
        upload = UploadedDocument(document.filename, document.file.read(), document.content_type)
    return repo.renew_license(db, license_id, expiry_date, storage, document=upload, actor=actor)
