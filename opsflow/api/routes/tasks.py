import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opsflow.core.deps import get_actor, get_db
from opsflow.models.task import TaskPriority, TaskStatus
from opsflow.repositories import tasks as repo
from opsflow.schemas.task import TaskBoardOut, TaskCreate, TaskOut, TaskUpdate

router = APIRouter()


@router.get("", response_model=list[TaskOut])
def list_tasks(
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
    employee_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
) -> list[TaskOut]:
    return repo.list_tasks(db, status, priority, employee_id)


@router.post("", response_model=TaskOut, status_code=201)
def create_task(payload: TaskCreate, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> TaskOut:
    return repo.create_task(db, payload, actor)


@router.get("/board", response_model=TaskBoardOut)
def task_board(db: Session = Depends(get_db)) -> TaskBoardOut:
    return repo.board(db)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: uuid.UUID, db: Session = Depends(get_db)) -> TaskOut:
    return repo.get_task(db, task_id)


@router.api_route("/{task_id}", methods=["PUT", "PATCH"], response_model=TaskOut)
def update_task(
    task_id: uuid.UUID,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
) -> TaskOut:
    return repo.update_task(db, task_id, payload, actor)


@router.delete("/{task_id}")
def delete_task(task_id: uuid.UUID, db: Session = Depends(get_db), actor: str | None = Depends(get_actor)) -> dict:
    repo.delete_task(db, task_id, actor)
    return {"message": "Task deleted successfully"}
