"""Provenance-layer exceptions. Typed, no HTTP."""

from rewrite_provenance.domain.models.audit_record import AuditRecord


class ProvenanceError(Exception):
    """Base for all provenance-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RepositoryError(ProvenanceError):
    """Raised by repository implementations when a record cannot be stored."""


class AuditPersistFailure(ProvenanceError):
    """
    Raised when a built audit record could not be stored. Carries the unpersisted
    record so the caller can retry persistence without recomputing it.
    """

    def __init__(self, message: str, record: AuditRecord) -> None:
        self.record = record
        super().__init__(message)


class AuditPersistTimeout(AuditPersistFailure):
    """Raised when persistence did not finish within the configured timeout."""
