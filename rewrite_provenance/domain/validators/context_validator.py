"""Validators for rewrite context rules. Pure functions, no infrastructure or DB access."""

from typing import Sequence

from rewrite_provenance.domain.exceptions import (
    InvalidClassificationError,
    InvalidOperationContext,
)
from rewrite_provenance.domain.models.audit_record import Coding
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import RewriteContext


def _is_usable(record_id: object) -> bool:
    return (
        isinstance(record_id, RecordId)
        and bool(record_id.type and record_id.type.strip())
        and bool(record_id.id and record_id.id.strip())
    )


def validate_rewrite_context(context: RewriteContext) -> None:
    """Target must be a usable identifier; source, if given, too. Raises InvalidOperationContext."""
    if context is None:
        raise InvalidOperationContext("rewrite context is required")
    if not _is_usable(context.target):
        raise InvalidOperationContext("rewrite context has no target")
    if context.source is not None and not _is_usable(context.source):
        raise InvalidOperationContext("rewrite context source is not a valid record id")
    if context.source is not None and context.source == context.target:
        raise InvalidOperationContext("rewrite source and target are the same record")
    if context.start_time is None:
        raise InvalidOperationContext("rewrite context has no start time")


def validate_reason_codes(reason_codes: Sequence[Coding]) -> None:
    """At least one reason code is required on every audit record."""
    if not reason_codes:
        raise InvalidClassificationError("classification produced no reason codes")
