from __future__ import annotations

from typing import Generator

from fastapi import Header
from sqlalchemy.orm import Session

from opsflow.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_actor(x_user_id: str | None = Header(default=None)) -> str | None:
    """Caller identity as forwarded by the identity provider, if any."""
    return x_user_id
