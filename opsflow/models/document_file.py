from __future__ import annotations

import uuid

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from opsflow.db.base import Base, utcnow


class DocumentFile(Base):
    __tablename__ = "document_files"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    folder_id = Column(Uuid, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    file_url = Column(Text, nullable=False)
    size = Column(BigInteger, default=0, nullable=False)
    upload_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    uploaded_by = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    folder = relationship("Folder", back_populates="documents")
