"""extract_touched: ordering, dedup, skipping outcomes without usable write evidence."""

from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import OutcomeStatus, SubOperationOutcome
from rewrite_provenance.provenance.result_collector import extract_touched


def updated(location):
    return SubOperationOutcome(status=OutcomeStatus.UPDATED, location_ref=location)


def failed():
    return SubOperationOutcome(status=OutcomeStatus.FAILED)


def _refs(touched):
    return [r.reference for r in touched]


def test_dedup_preserves_first_seen_order():
    batches = [
        [updated("Patient/1")],
        [updated("Patient/2"), updated("Patient/2")],
    ]
    touched = extract_touched(batches)
    assert _refs(touched) == ["Patient/1", "Patient/2"]
    assert len(touched) == 2


def test_failed_outcome_without_location_contributes_nothing():
    assert extract_touched([[failed()]]) == ()


def test_empty_input():
    assert extract_touched([]) == ()
    assert extract_touched([[], []]) == ()


def test_malformed_locations_are_skipped():
    batches = [[updated("not a location"), updated("Patient/3"), updated("Patient//x")]]
    assert _refs(extract_touched(batches)) == ["Patient/3"]


def test_noop_with_location_still_counted():
    batches = [[SubOperationOutcome(status=OutcomeStatus.NOOP, location_ref="Encounter/e1")]]
    assert extract_touched(batches) == (RecordId("Encounter", "e1"),)


def test_dedup_across_versions_keeps_first_version():
    batches = [[updated("Patient/1/_history/2")], [updated("Patient/1/_history/3")]]
    (only,) = extract_touched(batches)
    assert only.version == "2"


def test_idempotent_and_chunking_independent():
    outcomes = [
        updated("Patient/1"),
        failed(),
        updated("Observation/7/_history/1"),
        updated("Patient/1"),
        updated("Encounter/e"),
        updated(None),
    ]
    single = extract_touched([outcomes])
    assert extract_touched([outcomes]) == single
    chunked = extract_touched([outcomes[:2], outcomes[2:4], [], outcomes[4:]])
    assert chunked == single
    assert _refs(single) == ["Patient/1", "Observation/7", "Encounter/e"]


def test_accepts_generators():
    batches = (iter([updated(f"Patient/{i}")]) for i in range(3))
    assert _refs(extract_touched(batches)) == ["Patient/0", "Patient/1", "Patient/2"]
