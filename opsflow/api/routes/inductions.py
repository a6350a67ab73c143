import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from opsflow.core.config import settings
from opsflow.core.deps import get_actor, get_db
from opsflow.repositories import inductions as repo
from opsflow.schemas.induction import InductionOut, InductionProgressUpdate, InductionUpdate, InductionWithEmployeeOut

router = APIRouter()


@router.get("/expiring", response_model=list[InductionWithEmployeeOut])
def list_expiring_inductions(
    days: int = Query(default=settings.EXPIRY_WARNING_DAYS, ge=0, le=3650),
    db: Session = Depends(get_db),
) -> list[InductionWithEmployeeOut]:
    return repo.list_expiring(db, days)


@router.get("/{induction_id}", response_model=InductionWithEmployeeOut)
def get_induction(induction_id: uuid.UUID, db: Session = Depends(get_db)) -> InductionWithEmployeeOut:
    return repo.get_induction(db, induction_id)


@router.api_route("/{induction_id}", methods=["PUT", "PATCH"], response_model=InductionOut)
def update_induction(
    induction_id: uuid.UUID,
    payload: InductionUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> InductionOut:
    return repo.update_induction(db, induction_id, payload, actor=actor)


@router.post("/{induction_id}/progress", response_model=InductionOut)
def update_induction_progress(
    induction_id: uuid.UUID,
    payload: InductionProgressUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> InductionOut:
    return repo.update_progress(db, induction_id, payload, actor=actor)


@router.delete("/{induction_id}")
def delete_induction(induction_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_induction(db, induction_id, actor=actor)
    return {"message": "Induction deleted successfully"}
