"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from rewrite_provenance.domain.exceptions import (
    DomainError,
    InvalidClassificationError,
    InvalidOperationContext,
    MalformedLocationReference,
)
from rewrite_provenance.domain.models import (
    AuditRecord,
    Coding,
    OutcomeStatus,
    RecordId,
    RewriteContext,
    SubOperationOutcome,
)
from rewrite_provenance.domain.schemas import PatchResultBundle, outcomes_from_bundles
from rewrite_provenance.domain.validators import (
    validate_reason_codes,
    validate_rewrite_context,
)

__all__ = [
    "AuditRecord",
    "Coding",
    "DomainError",
    "InvalidClassificationError",
    "InvalidOperationContext",
    "MalformedLocationReference",
    "OutcomeStatus",
    "PatchResultBundle",
    "RecordId",
    "RewriteContext",
    "SubOperationOutcome",
    "outcomes_from_bundles",
    "validate_reason_codes",
    "validate_rewrite_context",
]
