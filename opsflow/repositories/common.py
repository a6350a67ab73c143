from __future__ import annotations

import re
import uuid
from typing import Any, TypeVar

from sqlalchemy.orm import Session

from opsflow.core.errors import NotFoundError

T = TypeVar("T")

# Canonical textual UUID, versions 1-5, RFC 4122 variant
_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)


def parse_folder_ref(value: str | uuid.UUID | None) -> uuid.UUID | None:
    """Folder reference from a client; None, "root" or any non-UUID means top level."""
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    value = value.strip()
    if not _UUID_RE.match(value):
        return None
    return uuid.UUID(value)


def get_or_raise(
    db: Session,
    model: type[T],
    entity_id: Any,
    message: str,
    error: type[NotFoundError] = NotFoundError,
) -> T:
    instance = db.query(model).filter(model.id == entity_id).first()
    if instance is None:
        raise error(message)
    return instance


LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Lower-cased ``%term%`` with LIKE wildcards in the term matched literally."""
    escaped = (
        term.strip()
        .lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
