import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.repositories import folders as repo
from opsflow.repositories.common import parse_folder_ref
from opsflow.schemas.folder import FolderCreate, FolderOut, FolderUpdate

router = APIRouter()


@router.get("", response_model=list[FolderOut])
def list_folders(parent_id: str | None = None, db: Session = Depends(get_db)) -> list[FolderOut]:
    if parent_id is None:
        return repo.list_folders(db)
    return repo.list_children(db, parse_folder_ref(parent_id))


@router.post("", response_model=FolderOut, status_code=201)
def create_folder(payload: FolderCreate, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> FolderOut:
    return repo.create_folder(db, payload, actor)


@router.get("/{folder_id}", response_model=FolderOut)
def get_folder(folder_id: uuid.UUID, db: Session = Depends(get_db)) -> FolderOut:
    return repo.get_folder(db, folder_id)


@router.get("/{folder_id}/children", response_model=list[FolderOut])
def list_children(folder_id: uuid.UUID, db: Session = Depends(get_db)) -> list[FolderOut]:
    return repo.list_children(db, folder_id)


@router.api_route("/{folder_id}", methods=["PUT", "PATCH"], response_model=FolderOut)
def update_folder(
    folder_id: uuid.UUID,
    payload: FolderUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> FolderOut:
    return repo.update_folder(db, folder_id, payload, actor)


@router.delete("/{folder_id}")
def delete_folder(folder_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_folder(db, folder_id, actor)
    return {"message": "Folder deleted successfully"}
