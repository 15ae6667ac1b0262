"""Rewrite operation context and per-record sub-operation outcomes."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from rewrite_provenance.domain.models.record_id import RecordId


class OutcomeStatus(str, Enum):
    """Result of one per-record patch attempt."""

    CREATED = "created"
    UPDATED = "updated"
    NOOP = "noop"
    FAILED = "failed"


@dataclass(frozen=True)
class SubOperationOutcome:
    """One outcome per attempted patch. location_ref is set only when a write happened."""

    status: OutcomeStatus
    location_ref: Optional[str] = None

    @property
    def has_location(self) -> bool:
        return bool(self.location_ref)


@dataclass(frozen=True)
class RewriteContext:
    """
    Immutable description of a finished rewrite: surviving target, optional retired
    source (merge-style rewrites only), and the time the rewrite began.
    """

    target: RecordId
    start_time: datetime
    source: Optional[RecordId] = None
    job_id: Optional[str] = None

    @property
    def is_merge(self) -> bool:
        return self.source is not None

    def anchors(self) -> Tuple[RecordId, ...]:
        """Target first, then source when present."""
        if self.source is None:
            return (self.target,)
        return (self.target, self.source)
