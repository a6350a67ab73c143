from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String

from opsflow.db.base import Base, JSONType, utcnow


class AuditLog(Base):
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True)
    actor = Column(String(255), nullable=True, index=True)
    action = Column(String(64), nullable=False)
    entity_type = Column(String(64), nullable=False)
    entity_id = Column(String(64), nullable=True)
    ts = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    details = Column(JSONType, nullable=True)
