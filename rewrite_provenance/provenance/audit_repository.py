"""Audit repository protocol. Provenance layer depends on this; infrastructure implements it."""

from typing import Protocol

from rewrite_provenance.domain.models.audit_record import AuditRecord
from rewrite_provenance.domain.models.record_id import RecordId


class AuditRepository(Protocol):
    """Append-only store for audit records. Must be safe under concurrent create() calls."""

    async def create(self, record: AuditRecord) -> RecordId:
        """Persist a new audit record and return its id. Raises RepositoryError on failure."""
        ...
