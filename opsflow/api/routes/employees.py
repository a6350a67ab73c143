import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.models.employee import EmployeeStatus
from opsflow.repositories import employees as repo
from opsflow.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate

router = APIRouter()


@router.get("", response_model=list[EmployeeOut])
def list_employees(
    search: str | None = None,
    department: str | None = None,
    status: EmployeeStatus | None = None,
    db: Session = Depends(get_db),
) -> list[EmployeeOut]:
    return repo.list_employees(db, search=search, department=department, status=status)


@router.post("", response_model=EmployeeOut, status_code=201)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> EmployeeOut:
    return repo.create_employee(db, payload, actor)


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: uuid.UUID, db: Session = Depends(get_db)) -> EmployeeOut:
    return repo.get_employee(db, employee_id)


@router.api_route("/{employee_id}", methods=["PUT", "PATCH"], response_model=EmployeeOut)
def update_employee(
    employee_id: uuid.UUID,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> EmployeeOut:
    return repo.update_employee(db, employee_id, payload, actor)


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> Response:
    repo.delete_employee(db, employee_id, actor)
    return Response(status_code=204)
