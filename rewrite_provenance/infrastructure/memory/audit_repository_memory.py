"""In-memory audit repository. Same surface as the DB repository; for tests and local runs."""

import uuid
from typing import Dict, Optional

from rewrite_provenance.domain.models.audit_record import AuditRecord
from rewrite_provenance.domain.models.record_id import RecordId

STORED_VERSION = "1"


class InMemoryAuditRepository:
    """Append-only dict store. create() has no await point, so concurrent calls cannot interleave."""

    def __init__(self) -> None:
        self._records: Dict[str, AuditRecord] = {}

    async def create(self, record: AuditRecord) -> RecordId:
        record_id = str(uuid.uuid4())
        self._records[record_id] = record
        return RecordId(type=record.record_type, id=record_id, version=STORED_VERSION)

    async def get(self, record_id: RecordId) -> Optional[AuditRecord]:
        return self._records.get(record_id.id)

    def __len__(self) -> int:
        return len(self._records)
