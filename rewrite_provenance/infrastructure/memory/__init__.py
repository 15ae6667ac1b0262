from rewrite_provenance.infrastructure.memory.audit_repository_memory import (
    InMemoryAuditRepository,
)

__all__ = ["InMemoryAuditRepository"]
