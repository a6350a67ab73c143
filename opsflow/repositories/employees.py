from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from opsflow.core.audit import log_audit
from opsflow.core.errors import ConflictError
from opsflow.db import gateway
from opsflow.db.updates import UpdateSet
from opsflow.models.employee import Employee, EmployeeStatus
from opsflow.repositories.common import LIKE_ESCAPE, contains_pattern, get_or_raise
from opsflow.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger("opsflow.employees")


def list_employees(
    db: Session,
    search: str | None = None,
    department: str | None = None,
    status: EmployeeStatus | None = None,
) -> list[Employee]:
    query = db.query(Employee)
    if search:
        pattern = contains_pattern(search)
        query = query.filter(
            or_(
                func.lower(Employee.first_name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Employee.last_name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Employee.email).like(pattern, escape=LIKE_ESCAPE),
            )
        )
    if department:
        query = query.filter(Employee.department == department)
    if status:
        query = query.filter(Employee.status == status)
    return query.order_by(Employee.last_name, Employee.first_name).all()


def list_departments(db: Session) -> list[str]:
    rows = (
        db.query(Employee.department)
        .filter(Employee.department.isnot(None), Employee.department != "")
        .distinct()
        .order_by(Employee.department)
        .all()
    )
    return [row[0] for row in rows]


def get_employee(db: Session, employee_id: uuid.UUID) -> Employee:
    return get_or_raise(db, Employee, employee_id, "Employee not found")


def _ensure_email_free(db: Session, email: str, exclude_id: uuid.UUID | None = None) -> None:
    query = db.query(Employee.id).filter(func.lower(Employee.email) == email.lower())
    if exclude_id is not None:
        query = query.filter(Employee.id != exclude_id)
    if query.first():
        raise ConflictError("Employee with this email already exists")


def create_employee(db: Session, payload: EmployeeCreate, actor: str | None = None) -> Employee:
    _ensure_email_free(db, payload.email)
    employee = Employee(**payload.model_dump())
    db.add(employee)
    db.flush()
    log_audit(db, actor, "CREATE", "employee", employee.id, {"email": employee.email})
    gateway.commit(db, "Employee with this email already exists")
    db.refresh(employee)
    logger.info("Created employee %s", employee.id)
    return employee


def update_employee(
    db: Session, employee_id: uuid.UUID, payload: EmployeeUpdate, actor: str | None = None
) -> Employee:
    employee = get_employee(db, employee_id)
    changes = UpdateSet.for_model(Employee, payload)
    if not changes:
        return employee
    if changes.get("email"):
        _ensure_email_free(db, changes.get("email"), exclude_id=employee.id)
    changes.apply(employee)
    log_audit(db, actor, "UPDATE", "employee", employee.id, changes.values)
    gateway.commit(db, "Employee with this email already exists")
    db.refresh(employee)
    return employee


def delete_employee(db: Session, employee_id: uuid.UUID, actor: str | None = None) -> None:
    employee = get_employee(db, employee_id)
    # Licenses, inductions, documents and contacts cascade; tasks are unassigned
    db.delete(employee)
    log_audit(db, actor, "DELETE", "employee", employee_id, {"email": employee.email})
    gateway.commit(db)
    logger.info("Deleted employee %s", employee_id)
