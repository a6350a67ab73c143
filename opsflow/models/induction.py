from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Column, Date, DateTime, Enum as SAEnum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from opsflow.db.base import Base, utcnow
from opsflow.models.employee import enum_values


class InductionStatus(str, Enum):
    COMPLETED = "Completed"
    PENDING = "Pending"
    EXPIRED = "Expired"
    IN_PROGRESS = "In Progress"


class Induction(Base):
    __tablename__ = "inductions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    provider = Column(String(255), nullable=True)
    completed_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True, index=True)
    status = Column(
        SAEnum(InductionStatus, name="induction_status", values_callable=enum_values),
        default=InductionStatus.PENDING,
        nullable=False,
    )
    # JSON text: portal_url, username, password, document_url, additional_notes
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    employee = relationship("Employee", back_populates="inductions")
