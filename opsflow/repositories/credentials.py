"""Credentials vault.

Passwords are stored as Fernet tokens and only decrypted when a record is
turned into its response shape. Strength is recomputed whenever the password
changes.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.encryption import FieldEncryptor, get_encryptor
from opsflow.core.errors import ConflictError
from opsflow.core.password_strength import calculate_strength
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.credential import Credential, CredentialCategory
from opsflow.repositories.common import LIKE_ESCAPE, contains_pattern, get_or_raise
from opsflow.schemas.credential import CredentialCategoryCreate, CredentialCreate, CredentialOut, CredentialUpdate

logger = logging.getLogger("opsflow.credentials")


def to_out(credential: Credential, encryptor: FieldEncryptor | None = None) -> CredentialOut:
    encryptor = encryptor or get_encryptor()
    return CredentialOut(
        id=credential.id,
        name=credential.name,
        category=credential.category,
        username=credential.username,
        password=encryptor.decrypt(credential.password_encrypted),
        url=credential.url,
        notes=credential.notes,
        tags=credential.tags or [],
        expiration_date=credential.expiration_date,
        status=credential.status,
        strength=credential.strength,
        created_by=credential.created_by,
        created_at=credential.created_at,
        updated_at=credential.updated_at,
    )


def list_credentials(db: Session, category: str | None = None, search: str | None = None) -> list[Credential]:
    query = db.query(Credential)
    if category:
        query = query.filter(Credential.category == category)
    if search:
        pattern = contains_pattern(search)
        query = query.filter(
            or_(
                func.lower(Credential.name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Credential.username).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Credential.notes).like(pattern, escape=LIKE_ESCAPE),
                func.lower(cast(Credential.tags, String)).like(pattern, escape=LIKE_ESCAPE),
            )
        )
    return query.order_by(Credential.name).all()


def get_credential(db: Session, credential_id: uuid.UUID) -> Credential:
    return get_or_raise(db, Credential, credential_id, "Credential not found")


def create_credential(db: Session, payload: CredentialCreate, actor: str | None = None) -> Credential:
    data = payload.model_dump(exclude={"password"})
    credential = Credential(
        **data,
        password_encrypted=get_encryptor().encrypt(payload.password),
        strength=calculate_strength(payload.password),
        created_by=actor,
    )
    db.add(credential)
    db.flush()
    log_audit(db, actor, "CREATE", "credential", credential.id, {"name": credential.name, "category": credential.category})
    gateway.commit(db)
    db.refresh(credential)
    logger.info("Stored credential %s (%s)", credential.id, credential.strength.value)
    return credential


def update_credential(
    db: Session, credential_id: uuid.UUID, payload: CredentialUpdate, actor: str | None = None
) -> Credential:
    credential = get_credential(db, credential_id)
    raw = payload.model_dump(exclude_unset=True)
    password = raw.pop("password", None)
    changes = UpdateSet.for_model(Credential, raw, exclude={"password_encrypted", "strength", "created_by"})
    if password:
        changes = changes.with_value("password_encrypted", get_encryptor().encrypt(password))
        changes = changes.with_value("strength", calculate_strength(password))
    if not changes:
        return credential
    changes.apply(credential)
    audit = {k: v for k, v in changes.values.items() if k != "password_encrypted"}
    if password:
        audit["password_changed"] = True
    log_audit(db, actor, "UPDATE", "credential", credential.id, audit)
    gateway.commit(db)
    db.refresh(credential)
    return credential


def delete_credential(db: Session, credential_id: uuid.UUID, actor: str | None = None) -> None:
    credential = get_credential(db, credential_id)
    db.delete(credential)
    log_audit(db, actor, "DELETE", "credential", credential_id, {"name": credential.name})
    gateway.commit(db)


def list_categories(db: Session) -> list[CredentialCategory]:
    return db.query(CredentialCategory).order_by(CredentialCategory.name).all()


def create_category(db: Session, payload: CredentialCategoryCreate, actor: str | None = None) -> CredentialCategory:
    name = payload.name.strip()
    exists = db.query(CredentialCategory.id).filter(func.lower(CredentialCategory.name) == name.lower()).first()
    if exists:
        raise ConflictError("Category already exists")
    category = CredentialCategory(name=name, description=payload.description)
    db.add(category)
    db.flush()
    log_audit(db, actor, "CREATE", "credential_category", category.id, {"name": name})
    gateway.commit(db, "Category already exists")
    db.refresh(category)
    return category
