from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_db
from opsflow.repositories.employees import list_departments

router = APIRouter()


@router.get("", response_model=list[str])
def departments(db: Session = Depends(get_db)) -> list[str]:
    return list_departments(db)
