"""Immutable audit record for a completed rewrite. Domain-level immutability."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from rewrite_provenance.domain.models.record_id import RecordId

DEFAULT_RECORD_TYPE = "Provenance"


def _iso_millis(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


@dataclass(frozen=True)
class Coding:
    """A (system, code) classification pair."""

    system: str
    code: str
    display: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"system": self.system, "code": self.code}
        if self.display is not None:
            out["display"] = self.display
        return out


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable lineage artifact: what changed (targets), when (occurred/recorded), why (reason codes).
    targets[0] is the rewrite target; targets[1] is the source for merge-style rewrites.
    """

    occurred_start: datetime
    occurred_end: datetime
    recorded: datetime
    reason_codes: Tuple[Coding, ...]
    targets: Tuple[RecordId, ...]
    activity_code: Optional[Coding] = None
    record_type: str = DEFAULT_RECORD_TYPE

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for JSON storage and logging."""
        out: Dict[str, Any] = {
            "resourceType": self.record_type,
            "occurredPeriod": {
                "start": _iso_millis(self.occurred_start),
                "end": _iso_millis(self.occurred_end),
            },
            "recorded": _iso_millis(self.recorded),
            "reason": [{"coding": [c.to_dict()]} for c in self.reason_codes],
            "target": [{"reference": t.versioned_reference} for t in self.targets],
        }
        if self.activity_code is not None:
            out["activity"] = {"coding": [self.activity_code.to_dict()]}
        return out
