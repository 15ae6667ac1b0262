"""Domain models. Frozen dataclasses, no ORM."""

from rewrite_provenance.domain.models.audit_record import AuditRecord, Coding
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import (
    OutcomeStatus,
    RewriteContext,
    SubOperationOutcome,
)

__all__ = [
    "AuditRecord",
    "Coding",
    "OutcomeStatus",
    "RecordId",
    "RewriteContext",
    "SubOperationOutcome",
]
