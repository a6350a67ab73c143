from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import Column, Date, DateTime, Enum as SAEnum, String, Text, Uuid

from opsflow.db.base import Base, JSONType, utcnow
from opsflow.models.employee import enum_values


class CredentialStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


class PasswordStrength(str, Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class Credential(Base):
    __tablename__ = "credentials"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    username = Column(String(255), nullable=False)
    # Fernet token, see opsflow.core.encryption
    password_encrypted = Column(Text, nullable=False)
    url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(JSONType, nullable=True)
    expiration_date = Column(Date, nullable=True)
    status = Column(
        SAEnum(CredentialStatus, name="credential_status", values_callable=enum_values),
        default=CredentialStatus.ACTIVE,
        nullable=False,
    )
    strength = Column(
        SAEnum(PasswordStrength, name="password_strength", values_callable=enum_values),
        nullable=False,
    )
    created_by = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class CredentialCategory(Base):
    __tablename__ = "credential_categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
