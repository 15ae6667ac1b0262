"""Classification of a rewrite into reason and activity codes. Pluggable per caller."""

from typing import Optional, Protocol, Tuple

from rewrite_provenance.config.settings import get_settings
from rewrite_provenance.domain.models.audit_record import Coding
from rewrite_provenance.domain.models.rewrite import RewriteContext

ACT_REASON_CODE_SYSTEM = "http://terminology.hl7.org/CodeSystem/v3-ActReason"
ACT_REASON_PATIENT_ADMINISTRATION_CODE = "PATADMIN"


class ClassificationStrategy(Protocol):
    """Supplies the 'why' of an audit record."""

    def reason_codes(self, context: RewriteContext) -> Tuple[Coding, ...]:
        """Non-empty, ordered reason codes for this rewrite."""
        ...

    def activity_code(self, context: RewriteContext) -> Optional[Coding]:
        """Kind of rewrite (e.g. merge vs. plain reference replace), or None."""
        ...


class AdministrativeClassification:
    """
    Single fixed administrative reason code, no activity code.
    Same classification for merge and plain replace rewrites.
    """

    def __init__(self, reason: Optional[Coding] = None) -> None:
        self._reason = reason or Coding(
            system=ACT_REASON_CODE_SYSTEM, code=ACT_REASON_PATIENT_ADMINISTRATION_CODE
        )

    @classmethod
    def from_settings(cls) -> "AdministrativeClassification":
        settings = get_settings()
        return cls(Coding(system=settings.reason_code_system, code=settings.reason_code))

    def reason_codes(self, context: RewriteContext) -> Tuple[Coding, ...]:
        return (self._reason,)

    def activity_code(self, context: RewriteContext) -> Optional[Coding]:
        return None
