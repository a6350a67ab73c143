"""Records nested under one employee: licenses, inductions, documents."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.repositories import employee_documents, inductions, licenses
from opsflow.schemas.employee_document import EmployeeDocumentCreate, EmployeeDocumentOut, EmployeeDocumentUpdate
from opsflow.schemas.induction import InductionCreate, InductionOut, InductionUpdate
from opsflow.schemas.license import LicenseCreate, LicenseOut, LicenseUpdate

router = APIRouter()


@router.get("/{employee_id}/licenses", response_model=list[LicenseOut])
def list_employee_licenses(employee_id: uuid.UUID, db: Session = Depends(get_db)) -> list[LicenseOut]:
    return licenses.list_for_employee(db, employee_id)


@router.post("/{employee_id}/licenses", response_model=LicenseOut, status_code=201)
def create_employee_license(
    employee_id: uuid.UUID,
    payload: LicenseCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> LicenseOut:
    return licenses.create_license(db, employee_id, payload, actor)


@router.get("/{employee_id}/licenses/{license_id}", response_model=LicenseOut)
def get_employee_license(employee_id: uuid.UUID, license_id: uuid.UUID, db: Session = Depends(get_db)) -> LicenseOut:
    return licenses.get_license(db, license_id, employee_id)


@router.api_route("/{employee_id}/licenses/{license_id}", methods=["PUT", "PATCH"], response_model=LicenseOut)
def update_employee_license(
    employee_id: uuid.UUID,
    license_id: uuid.UUID,
    payload: LicenseUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> LicenseOut:
    return licenses.update_license(db, license_id, payload, employee_id=employee_id, actor=actor)


@router.delete("/{employee_id}/licenses/{license_id}")
def delete_employee_license(
    employee_id: uuid.UUID,
    license_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> dict:
    licenses.delete_license(db, license_id, employee_id=employee_id, actor=actor)
    return {"message": "License deleted successfully"}


@router.get("/{employee_id}/inductions", response_model=list[InductionOut])
def list_employee_inductions(employee_id: uuid.UUID, db: Session = Depends(get_db)) -> list[InductionOut]:
    return inductions.list_for_employee(db, employee_id)


@router.post("/{employee_id}/inductions", response_model=InductionOut, status_code=201)
def create_employee_induction(
    employee_id: uuid.UUID,
    payload: InductionCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> InductionOut:
    return inductions.create_induction(db, employee_id, payload, actor)


@router.get("/{employee_id}/inductions/{induction_id}", response_model=InductionOut)
def get_employee_induction(employee_id: uuid.UUID, induction_id: uuid.UUID, db: Session = Depends(get_db)) -> InductionOut:
    return inductions.get_induction(db, induction_id, employee_id)


@router.api_route("/{employee_id}/inductions/{induction_id}", methods=["PUT", "PATCH"], response_model=InductionOut)
def update_employee_induction(
    employee_id: uuid.UUID,
    induction_id: uuid.UUID,
    payload: InductionUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> InductionOut:
    return inductions.update_induction(db, induction_id, payload, employee_id=employee_id, actor=actor)


@router.delete("/{employee_id}/inductions/{induction_id}")
def delete_employee_induction(
    employee_id: uuid.UUID,
    induction_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> dict:
    inductions.delete_induction(db, induction_id, employee_id=employee_id, actor=actor)
    return {"message": "Induction deleted successfully"}


@router.get("/{employee_id}/documents", response_model=list[EmployeeDocumentOut])
def list_employee_documents(employee_id: uuid.UUID, db: Session = Depends(get_db)) -> list[EmployeeDocumentOut]:
    return employee_documents.list_for_employee(db, employee_id)


@router.post("/{employee_id}/documents", response_model=EmployeeDocumentOut, status_code=201)
def create_employee_document(
    employee_id: uuid.UUID,
    payload: EmployeeDocumentCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> EmployeeDocumentOut:
    return employee_documents.create_document(db, employee_id, payload, actor)


@router.get("/{employee_id}/documents/{document_id}", response_model=EmployeeDocumentOut)
def get_employee_document(employee_id: uuid.UUID, document_id: uuid.UUID, db: Session = Depends(get_db)) -> EmployeeDocumentOut:
    return employee_documents.get_document(db, employee_id, document_id)


@router.api_route("/{employee_id}/documents/{document_id}", methods=["PUT", "PATCH"], response_model=EmployeeDocumentOut)
def update_employee_document(
    employee_id: uuid.UUID,
    document_id: uuid.UUID,
    payload: EmployeeDocumentUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> EmployeeDocumentOut:
    return employee_documents.update_document(db, employee_id, document_id, payload, actor)


@router.delete("/{employee_id}/documents/{document_id}")
def delete_employee_document(
    employee_id: uuid.UUID,
    document_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> dict:
    employee_documents.delete_document(db, employee_id, document_id, actor)
    return {"message": "Document deleted successfully"}
