# rewrite_provenance/infrastructure/database/models.py

import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from rewrite_provenance.infrastructure.database.session import Base


class AuditRecordRow(Base):
    """ORM model for persisted audit records. Append-only: rows are never updated."""

    __tablename__ = "audit_records"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    record_type = Column(String, nullable=False, default="Provenance")

    occurred_start = Column(DateTime(timezone=True), nullable=False)
    occurred_end = Column(DateTime(timezone=True), nullable=False)
    recorded = Column(DateTime(timezone=True), nullable=False, index=True)

    reason_codes = Column(JSONB, nullable=False)
    activity_code = Column(JSONB, nullable=True)
    # [{"type": ..., "id": ..., "version": ...}] in record order
    targets = Column(JSONB, nullable=False)

    job_id = Column(String, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
