"""Folder tree with materialized paths.

Every folder stores ``path``, the slash-joined chain of ancestor names ending
in its own name (``/Parent/Child``). Renaming or moving a folder rewrites the
paths of its whole subtree in the same transaction, one query per tree level.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.errors import ConflictError, ReferenceNotFoundError, ValidationError
from opsflow.db import gateway
from opsflow.db.base import utcnow
from opsflow.db.updates import UpdateSet
from opsflow.models.folder import Folder
from opsflow.repositories.common import get_or_raise, parse_folder_ref
from opsflow.schemas.folder import FolderCreate, FolderUpdate

logger = logging.getLogger("opsflow.folders")

PATH_SEPARATOR = "/"


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Folder name is required")
    if PATH_SEPARATOR in name:
        raise ValidationError("Folder name cannot contain '/'")
    return name


def build_path(parent: Folder | None, name: str) -> str:
    prefix = parent.path if parent is not None else ""
    return f"{prefix}{PATH_SEPARATOR}{name}"


def list_folders(db: Session) -> list[Folder]:
    return db.query(Folder).order_by(Folder.path).all()


def list_children(db: Session, parent_id: uuid.UUID | None) -> list[Folder]:
    query = db.query(Folder)
    if parent_id is None:
        query = query.filter(Folder.parent_id.is_(None))
    else:
        get_folder(db, parent_id)
        query = query.filter(Folder.parent_id == parent_id)
    return query.order_by(Folder.name).all()


def get_folder(db: Session, folder_id: uuid.UUID) -> Folder:
    return get_or_raise(db, Folder, folder_id, "Folder not found")


def _get_parent(db: Session, parent_id: uuid.UUID | None) -> Folder | None:
    if parent_id is None:
        return None
    return get_or_raise(db, Folder, parent_id, "Parent folder not found", ReferenceNotFoundError)


def _ensure_unique_sibling(
    db: Session, parent_id: uuid.UUID | None, name: str, exclude_id: uuid.UUID | None = None
) -> None:
    query = db.query(Folder.id).filter(func.lower(Folder.name) == name.lower())
    if parent_id is None:
        query = query.filter(Folder.parent_id.is_(None))
    else:
        query = query.filter(Folder.parent_id == parent_id)
    if exclude_id is not None:
        query = query.filter(Folder.id != exclude_id)
    if query.first():
        raise ConflictError(f"A folder named '{name}' already exists in this location")


def _ensure_not_descendant(db: Session, folder: Folder, new_parent: Folder | None) -> None:
    # Walk parent pointers from the new parent up to the root
    node = new_parent
    while node is not None:
        if node.id == folder.id:
            raise ConflictError("Cannot move a folder into itself or one of its descendants")
        node = db.query(Folder).filter(Folder.id == node.parent_id).first() if node.parent_id else None


def _rewrite_descendant_paths(db: Session, root: Folder) -> int:
    now = utcnow()
    rewritten = 0
    level = {root.id: root.path}
    while level:
        children = db.query(Folder).filter(Folder.parent_id.in_(list(level))).all()
        next_level: dict[uuid.UUID, str] = {}
        for child in children:
            child.path = f"{level[child.parent_id]}{PATH_SEPARATOR}{child.name}"
            child.updated_at = now
            next_level[child.id] = child.path
        rewritten += len(children)
        level = next_level
    return rewritten


def create_folder(db: Session, payload: FolderCreate, actor: str | None = None) -> Folder:
    name = _clean_name(payload.name)
    parent = _get_parent(db, parse_folder_ref(payload.parent_id))
    parent_id = parent.id if parent is not None else None
    _ensure_unique_sibling(db, parent_id, name)

    folder = Folder(name=name, parent_id=parent_id, description=payload.description, path=build_path(parent, name))
    db.add(folder)
    db.flush()
    log_audit(db, actor, "CREATE", "folder", folder.id, {"path": folder.path})
    gateway.commit(db)
    db.refresh(folder)
    logger.info("Created folder %s", folder.path)
    return folder


def update_folder(db: Session, folder_id: uuid.UUID, payload: FolderUpdate, actor: str | None = None) -> Folder:
    folder = get_folder(db, folder_id)
    raw = payload.model_dump(exclude_unset=True)
    if not raw:
        return folder

    name = folder.name
    parent = folder.parent
    if "name" in raw:
        name = raw["name"] = _clean_name(raw["name"])
    if "parent_id" in raw:
        parent = _get_parent(db, parse_folder_ref(raw["parent_id"]))
        _ensure_not_descendant(db, folder, parent)
        raw["parent_id"] = parent.id if parent is not None else None

    changes = UpdateSet.for_model(Folder, raw, exclude={"path"})
    moved_or_renamed = name != folder.name or changes.get("parent_id", folder.parent_id) != folder.parent_id
    if moved_or_renamed:
        _ensure_unique_sibling(db, parent.id if parent is not None else None, name, exclude_id=folder.id)
        changes = changes.with_value("path", build_path(parent, name))

    old_path = folder.path
    changes.apply(folder)
    rewritten = _rewrite_descendant_paths(db, folder) if moved_or_renamed else 0
    log_audit(db, actor, "UPDATE", "folder", folder.id, {**changes.values, "old_path": old_path})
    gateway.commit(db)
    db.refresh(folder)
    if moved_or_renamed:
        logger.info("Folder %s is now %s (%d descendant paths rewritten)", old_path, folder.path, rewritten)
    return folder


def delete_folder(db: Session, folder_id: uuid.UUID, actor: str | None = None) -> None:
    folder = get_folder(db, folder_id)
    path = folder.path
    # Descendant folders cascade, their documents are detached (folder_id = NULL)
    db.delete(folder)
    log_audit(db, actor, "DELETE", "folder", folder_id, {"path": path})
    gateway.commit(db)
    logger.info("Deleted folder %s", path)
