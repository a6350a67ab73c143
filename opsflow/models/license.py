from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Column, Date, DateTime, Enum as SAEnum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from opsflow.db.base import Base, utcnow
from opsflow.models.employee import enum_values


class LicenseStatus(str, Enum):
    VALID = "Valid"
    EXPIRED = "Expired"
    EXPIRING_SOON = "Expiring Soon"
    RENEWAL_PENDING = "Renewal Pending"


class License(Base):
    __tablename__ = "licenses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    license_number = Column(String(100), nullable=True)
    issuing_authority = Column(String(255), nullable=True)
    issue_date = Column(Date, nullable=False)
    expiry_date = Column(Date, nullable=False, index=True)
    status = Column(
        SAEnum(LicenseStatus, name="license_status", values_callable=enum_values),
        default=LicenseStatus.VALID,
        nullable=False,
    )
    document_url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    employee = relationship("Employee", back_populates="licenses")
