import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.repositories import credentials as repo
from opsflow.schemas.credential import (
    CredentialCategoryCreate,
    CredentialCategoryOut,
    CredentialCreate,
    CredentialOut,
    CredentialUpdate,
)

router = APIRouter()


@router.get("", response_model=list[CredentialOut])
def list_credentials(
    category: str | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
) -> list[CredentialOut]:
    return [repo.to_out(item) for item in repo.list_credentials(db, category, search)]


@router.post("", response_model=CredentialOut, status_code=201)
def create_credential(payload: CredentialCreate, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> CredentialOut:
    return repo.to_out(repo.create_credential(db, payload, actor))


@router.get("/categories", response_model=list[CredentialCategoryOut])
def list_categories(db: Session = Depends(get_db)) -> list[CredentialCategoryOut]:
    return repo.list_categories(db)


@router.post("/categories", response_model=CredentialCategoryOut, status_code=201)
def create_category(
    payload: CredentialCategoryCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> CredentialCategoryOut:
    return repo.create_category(db, payload, actor)


@router.get("/{credential_id}", response_model=CredentialOut)
def get_credential(credential_id: uuid.UUID, db: Session = Depends(get_db)) -> CredentialOut:
    return repo.to_out(repo.get_credential(db, credential_id))


@router.api_route("/{credential_id}", methods=["PUT", "PATCH"], response_model=CredentialOut)
def update_credential(
    credential_id: uuid.UUID,
    payload: CredentialUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> CredentialOut:
    return repo.to_out(repo.update_credential(db, credential_id, payload, actor))


@router.delete("/{credential_id}")
def delete_credential(credential_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_credential(db, credential_id, actor)
    return {"message": "Credential deleted successfully"}
