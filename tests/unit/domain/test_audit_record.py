"""AuditRecord immutability and serialized shape; RewriteContext helpers."""

from datetime import datetime, timezone

import pytest

from rewrite_provenance.domain.models.audit_record import AuditRecord, Coding
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import RewriteContext

T0 = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
T1 = datetime(2024, 5, 1, 12, 0, 5, 500000, tzinfo=timezone.utc)
REASON = Coding(system="http://terminology.hl7.org/CodeSystem/v3-ActReason", code="PATADMIN")


def _record(**overrides) -> AuditRecord:
    values = dict(
        occurred_start=T0,
        occurred_end=T1,
        recorded=T1,
        reason_codes=(REASON,),
        targets=(RecordId("Patient", "9"), RecordId("Observation", "5", version="2")),
    )
    values.update(overrides)
    return AuditRecord(**values)


def test_audit_record_is_immutable():
    record = _record()
    with pytest.raises(AttributeError):
        record.recorded = T0  # type: ignore[misc]


def test_to_dict_shape():
    d = _record().to_dict()
    assert d["resourceType"] == "Provenance"
    assert d["occurredPeriod"] == {
        "start": "2024-05-01T12:00:00.123+00:00",
        "end": "2024-05-01T12:00:05.500+00:00",
    }
    assert d["recorded"] == "2024-05-01T12:00:05.500+00:00"
    assert d["reason"] == [{"coding": [{"system": REASON.system, "code": "PATADMIN"}]}]
    assert d["target"] == [
        {"reference": "Patient/9"},
        {"reference": "Observation/5/_history/2"},
    ]
    assert "activity" not in d


def test_to_dict_includes_activity_when_set():
    activity = Coding(system="urn:example", code="merge", display="Merge")
    d = _record(activity_code=activity).to_dict()
    assert d["activity"] == {
        "coding": [{"system": "urn:example", "code": "merge", "display": "Merge"}]
    }


def test_context_anchors():
    target = RecordId("Patient", "9")
    source = RecordId("Patient", "8")
    replace = RewriteContext(target=target, start_time=T0)
    merge = RewriteContext(target=target, start_time=T0, source=source)
    assert replace.anchors() == (target,)
    assert not replace.is_merge
    assert merge.anchors() == (target, source)
    assert merge.is_merge
