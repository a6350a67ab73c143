from __future__ import annotations

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from opsflow.core.audit import log_audit
from opsflow.core.errors import ReferenceNotFoundError
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.employee import Employee
from opsflow.models.task import Task, TaskPriority, TaskStatus
from opsflow.repositories.common import get_or_raise
from opsflow.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger("opsflow.tasks")


def _check_assignee(db: Session, employee_id: uuid.UUID | None) -> None:
    if employee_id is not None:
        get_or_raise(db, Employee, employee_id, "Assigned employee not found", ReferenceNotFoundError)


def _next_position(db: Session, status: TaskStatus) -> int:
    current = db.query(func.max(Task.position)).filter(Task.status == status).scalar()
    return 0 if current is None else current + 1


def list_tasks(
    db: Session,
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
    employee_id: uuid.UUID | None = None,
) -> list[Task]:
    query = db.query(Task).options(joinedload(Task.assignee))
    if status:
        query = query.filter(Task.status == status)
    if priority:
        query = query.filter(Task.priority == priority)
    if employee_id:
        query = query.filter(Task.employee_id == employee_id)
    return query.order_by(Task.status, Task.position, Task.created_at).all()


def board(db: Session) -> dict[str, list[Task]]:
    columns: dict[str, list[Task]] = {status.value: [] for status in TaskStatus}
    tasks = db.query(Task).options(joinedload(Task.assignee)).order_by(Task.position, Task.created_at).all()
    for task in tasks:
        columns[task.status.value].append(task)
    return columns


def get_task(db: Session, task_id: uuid.UUID) -> Task:
    return get_or_raise(db, Task, task_id, "Task not found")


def create_task(db: Session, payload: TaskCreate, actor: str | None = None) -> Task:
    _check_assignee(db, payload.employee_id)
    data = payload.model_dump()
    if "position" not in payload.model_fields_set:
        data["position"] = _next_position(db, payload.status)
    task = Task(**data)
    db.add(task)
    db.flush()
    log_audit(db, actor, "CREATE", "task", task.id, {"title": task.title, "status": task.status})
    gateway.commit(db)
    db.refresh(task)
    return task


def update_task(db: Session, task_id: uuid.UUID, payload: TaskUpdate, actor: str | None = None) -> Task:
    task = get_task(db, task_id)
    changes = UpdateSet.for_model(Task, payload)
    if not changes:
        return task
    if "employee_id" in changes:
        _check_assignee(db, changes.get("employee_id"))
    new_status = changes.get("status", task.status)
    if new_status != task.status and "position" not in changes:
        # Moved to another column without an explicit slot goes to the bottom
        changes = changes.with_value("position", _next_position(db, new_status))
    previous = task.status
    changes.apply(task)
    log_audit(db, actor, "UPDATE", "task", task.id, changes.values)
    gateway.commit(db)
    db.refresh(task)
    if task.status != previous:
        logger.info("Task %s moved %s -> %s", task.id, previous.value, task.status.value)
    return task


def delete_task(db: Session, task_id: uuid.UUID, actor: str | None = None) -> None:
    task = get_task(db, task_id)
    db.delete(task)
    log_audit(db, actor, "DELETE", "task", task_id, {"title": task.title})
    gateway.commit(db)
