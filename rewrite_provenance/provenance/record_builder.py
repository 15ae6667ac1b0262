"""Assemble an immutable audit record from a rewrite context and its touched records."""

from datetime import datetime
from typing import Dict, Iterable, Optional

from rewrite_provenance.domain.models.audit_record import DEFAULT_RECORD_TYPE, AuditRecord
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import RewriteContext
from rewrite_provenance.domain.validators.context_validator import (
    validate_reason_codes,
    validate_rewrite_context,
)
from rewrite_provenance.provenance.classification import (
    AdministrativeClassification,
    ClassificationStrategy,
)


class RecordBuilder:
    """
    Pure builder. No clock reads, no I/O: the caller supplies `now`.
    """

    def __init__(
        self,
        classification: Optional[ClassificationStrategy] = None,
        record_type: str = DEFAULT_RECORD_TYPE,
    ) -> None:
        self._classification = classification or AdministrativeClassification()
        self._record_type = record_type

    def build(
        self,
        context: RewriteContext,
        touched: Iterable[RecordId],
        now: datetime,
    ) -> AuditRecord:
        """
        Build the audit record for a completed rewrite.

        occurred_end and recorded are both `now`, so recorded >= occurred_end always holds.
        occurred_start is context.start_time taken as-is, even if later than `now`.
        targets = target, source (if any), then touched records not already listed.
        Raises InvalidOperationContext if the context has no target.
        """
        validate_rewrite_context(context)
        reason_codes = tuple(self._classification.reason_codes(context))
        validate_reason_codes(reason_codes)

        targets: Dict[RecordId, None] = dict.fromkeys(context.anchors())
        for record_id in touched:
            targets.setdefault(record_id, None)

        return AuditRecord(
            occurred_start=context.start_time,
            occurred_end=now,
            recorded=now,
            reason_codes=reason_codes,
            targets=tuple(targets),
            activity_code=self._classification.activity_code(context),
            record_type=self._record_type,
        )
