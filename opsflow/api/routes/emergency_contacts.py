import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.repositories import emergency_contacts as repo
from opsflow.schemas.emergency_contact import EmergencyContactCreate, EmergencyContactOut, EmergencyContactUpdate

router = APIRouter()


@router.get("/{employee_id}/emergency-contacts", response_model=list[EmergencyContactOut])
def list_contacts(employee_id: uuid.UUID, db: Session = Depends(get_db)) -> list[EmergencyContactOut]:
    return repo.list_for_employee(db, employee_id)


@router.post("/{employee_id}/emergency-contacts", response_model=EmergencyContactOut, status_code=201)
def create_contact(
    employee_id: uuid.UUID,
    payload: EmergencyContactCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> EmergencyContactOut:
    return repo.create_contact(db, employee_id, payload, actor)


@router.get("/{employee_id}/emergency-contacts/{contact_id}", response_model=EmergencyContactOut)
def get_contact(employee_id: uuid.UUID, contact_id: uuid.UUID, db: Session = Depends(get_db)) -> EmergencyContactOut:
    return repo.get_contact(db, employee_id, contact_id)


@router.api_route("/{employee_id}/emergency-contacts/{contact_id}", methods=["PUT", "PATCH"], response_model=EmergencyContactOut)
def update_contact(
    employee_id: uuid.UUID,
    contact_id: uuid.UUID,
    payload: EmergencyContactUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> EmergencyContactOut:
    return repo.update_contact(db, employee_id, contact_id, payload, actor)


@router.delete("/{employee_id}/emergency-contacts/{contact_id}", status_code=204)
def delete_contact(
    employee_id: uuid.UUID,
    contact_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> Response:
    repo.delete_contact(db, employee_id, contact_id, actor)
    return Response(status_code=204)
