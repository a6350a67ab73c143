from fastapi import APIRouter

from opsflow.api.routes import (
    credentials,
    departments,
    documents,
    emergency_contacts,
    employee_records,
    employees,
    folders,
    health,
    inductions,
    licenses,
    tasks,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(employee_records.router, prefix="/employees", tags=["employees"])
api_router.include_router(emergency_contacts.router, prefix="/employees", tags=["emergency-contacts"])
api_router.include_router(departments.router, prefix="/departments", tags=["employees"])
api_router.include_router(licenses.router, prefix="/licenses", tags=["licenses"])
api_router.include_router(inductions.router, prefix="/inductions", tags=["inductions"])
api_router.include_router(folders.router, prefix="/folders", tags=["documents"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(credentials.router, prefix="/credentials", tags=["credentials"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
