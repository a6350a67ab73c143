from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_db
from opsflow.db.gateway import check_connection

router = APIRouter()


@router.get("/health")
def health(db: Session = Depends(get_db)) -> dict:
    database = "ok" if check_connection(db) else "unavailable"
    return {"status": "ok" if database == "ok" else "degraded", "database": database}
