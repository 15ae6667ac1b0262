"""Pydantic schemas for patch-result bundles handed over by the job framework. No DB or infrastructure."""

from typing import Any, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from rewrite_provenance.domain.models.rewrite import OutcomeStatus, SubOperationOutcome

# HTTP status code -> outcome status (avoid magic numbers at call sites)
_STATUS_BY_CODE = {
    201: OutcomeStatus.CREATED,
    200: OutcomeStatus.UPDATED,
    204: OutcomeStatus.UPDATED,
    304: OutcomeStatus.NOOP,
}
FAILURE_STATUS_MIN = 400


def _status_code(status: Optional[str]) -> Optional[int]:
    """Leading integer of an HTTP status line such as '200 OK'."""
    if not status:
        return None
    head = status.strip().split(" ", 1)[0]
    return int(head) if head.isdigit() else None


class PatchResponse(BaseModel):
    """Response part of one bundle entry."""

    status: Optional[str] = None
    location: Optional[str] = None

    @field_validator("location")
    @classmethod
    def blank_location_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v


class PatchResultEntry(BaseModel):
    response: Optional[PatchResponse] = None

    def to_outcome(self) -> SubOperationOutcome:
        response = self.response or PatchResponse()
        code = _status_code(response.status)
        if code is not None and code >= FAILURE_STATUS_MIN:
            status = OutcomeStatus.FAILED
        elif code in _STATUS_BY_CODE:
            status = _STATUS_BY_CODE[code]
        else:
            status = OutcomeStatus.UPDATED if response.location else OutcomeStatus.FAILED
        # a failed write has no location to attribute, whatever the response echoed
        location = None if status == OutcomeStatus.FAILED else response.location
        return SubOperationOutcome(status=status, location_ref=location)


class PatchResultBundle(BaseModel):
    """Result of one sub-operation group: a flat list of per-record entries."""

    entry: List[PatchResultEntry] = Field(default_factory=list)

    def to_outcomes(self) -> Tuple[SubOperationOutcome, ...]:
        return tuple(e.to_outcome() for e in self.entry)


def outcomes_from_bundles(
    raw_bundles: Iterable[Any],
) -> List[Tuple[SubOperationOutcome, ...]]:
    """Validate raw bundle dicts and convert each into one outcome batch."""
    return [PatchResultBundle.model_validate(raw).to_outcomes() for raw in raw_bundles]
