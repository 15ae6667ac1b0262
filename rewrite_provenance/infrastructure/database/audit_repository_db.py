"""DB-backed audit repository. Persists audit records to PostgreSQL (audit_records table)."""

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from rewrite_provenance.core.context import job_id_ctx
from rewrite_provenance.domain.models.audit_record import AuditRecord, Coding
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.infrastructure.database.models import AuditRecordRow
from rewrite_provenance.infrastructure.database.session import get_sessionmaker
from rewrite_provenance.provenance.exceptions import RepositoryError

STORED_VERSION = "1"


def _coding_to_json(coding: Coding) -> Dict[str, Any]:
    return {"system": coding.system, "code": coding.code, "display": coding.display}


def _coding_from_json(data: Dict[str, Any]) -> Coding:
    return Coding(system=data["system"], code=data["code"], display=data.get("display"))


def _target_to_json(record_id: RecordId) -> Dict[str, Any]:
    return {"type": record_id.type, "id": record_id.id, "version": record_id.version}


def _target_from_json(data: Dict[str, Any]) -> RecordId:
    return RecordId(type=data["type"], id=data["id"], version=data.get("version"))


def _row_to_record(row: AuditRecordRow) -> AuditRecord:
    targets: List[Dict[str, Any]] = row.targets or []
    return AuditRecord(
        occurred_start=row.occurred_start,
        occurred_end=row.occurred_end,
        recorded=row.recorded,
        reason_codes=tuple(_coding_from_json(c) for c in row.reason_codes),
        targets=tuple(_target_from_json(t) for t in targets),
        activity_code=_coding_from_json(row.activity_code) if row.activity_code else None,
        record_type=row.record_type,
    )


class DbAuditRepository:
    """
    Persists audit records to PostgreSQL. Implements AuditRepository protocol.
    Each call opens its own session, so one instance can serve concurrent recorders.
    """

    def __init__(self, sessionmaker: Optional[async_sessionmaker] = None) -> None:
        self._sessionmaker = sessionmaker or get_sessionmaker()

    async def create(self, record: AuditRecord) -> RecordId:
        """Insert one row and commit. SQLAlchemy errors surface as RepositoryError."""
        orm = AuditRecordRow(
            id=uuid.uuid4(),
            record_type=record.record_type,
            occurred_start=record.occurred_start,
            occurred_end=record.occurred_end,
            recorded=record.recorded,
            reason_codes=[_coding_to_json(c) for c in record.reason_codes],
            activity_code=_coding_to_json(record.activity_code) if record.activity_code else None,
            targets=[_target_to_json(t) for t in record.targets],
            job_id=job_id_ctx.get(),
        )
        # one session and transaction per call; begin() commits on exit, rolls back on error
        try:
            async with self._sessionmaker() as session, session.begin():
                session.add(orm)
                await session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to store audit record: {e}") from e
        return RecordId(type=record.record_type, id=str(orm.id), version=STORED_VERSION)

    async def get(self, record_id: RecordId) -> Optional[AuditRecord]:
        """Return the stored record for this id, or None."""
        try:
            row_id = uuid.UUID(record_id.id)
        except ValueError:
            return None
        stmt = select(AuditRecordRow).where(AuditRecordRow.id == row_id)
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            orm = result.scalar_one_or_none()
        if orm is None:
            return None
        return _row_to_record(orm)
