"""Provenance recording: touched-set extraction, record building, persistence orchestration."""

from rewrite_provenance.provenance.audit_recorder import AuditRecorder
from rewrite_provenance.provenance.classification import (
    AdministrativeClassification,
    ClassificationStrategy,
)
from rewrite_provenance.provenance.clock import Clock, FixedClock, SystemClock
from rewrite_provenance.provenance.record_builder import RecordBuilder
from rewrite_provenance.provenance.result_collector import extract_touched

__all__ = [
    "AdministrativeClassification",
    "AuditRecorder",
    "ClassificationStrategy",
    "Clock",
    "FixedClock",
    "RecordBuilder",
    "SystemClock",
    "extract_touched",
]
