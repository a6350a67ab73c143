"""Single entry point for raw statement execution.

ORM reads go through ``Session.query`` in the repositories; bulk and
multi-row statements are sent through :func:`execute` so failures surface as
:class:`PersistenceError` and query timings can be logged with ``DB_DEBUG``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable

from opsflow.core.config import settings
from opsflow.core.errors import ConflictError, PersistenceError

logger = logging.getLogger("opsflow.db")


def execute(db: Session, statement: Executable, params: Mapping[str, Any] | None = None) -> Result:
    start = time.perf_counter()
    try:
        result = db.execute(statement, params) if params else db.execute(statement)
    except SQLAlchemyError as exc:
        logger.error("Database query failed: %s", exc)
        raise PersistenceError("Database query failed") from exc

    if settings.DB_DEBUG:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("Executed query in %.1fms: %s", elapsed_ms, statement)
    return result


def check_connection(db: Session) -> bool:
    try:
        execute(db, text("SELECT 1"))
    except PersistenceError:
        return False
    return True


def commit(db: Session, conflict_message: str = "Record conflicts with existing data") -> None:
    """Commit the unit of work, rolling back and translating on failure."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit: %s", exc.orig)
        raise ConflictError(conflict_message) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Commit failed: %s", exc)
        raise PersistenceError("Database write failed") from exc
