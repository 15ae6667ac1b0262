"""Derive the set of records actually written by a rewrite from its sub-operation outcomes."""

import logging
from typing import Dict, Iterable, Tuple

from rewrite_provenance.domain.exceptions import MalformedLocationReference
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import SubOperationOutcome

logger = logging.getLogger(__name__)


def extract_touched(
    batches: Iterable[Iterable[SubOperationOutcome]],
) -> Tuple[RecordId, ...]:
    """
    Scan batches in order, then outcomes in order. Every outcome with a parseable
    location counts as touched; outcomes without a location, or with a malformed
    one, are skipped. Output is first-seen order with (type, id) duplicates dropped.

    Status is not consulted: a no-op write that still reports a location is counted.
    Total function, never raises.
    """
    touched: Dict[RecordId, None] = {}
    skipped = 0
    for batch in batches:
        for outcome in batch:
            if not outcome.has_location:
                continue
            try:
                record_id = RecordId.parse(outcome.location_ref)
            except MalformedLocationReference as e:
                skipped += 1
                logger.debug(
                    "malformed_location_skipped",
                    extra={"location": outcome.location_ref, "error": e.message},
                )
                continue
            # dict keeps the first key object on re-insert, so the first-seen version wins
            touched.setdefault(record_id, None)
    logger.debug(
        "touched_extracted",
        extra={"touched_count": len(touched), "skipped_count": skipped},
    )
    return tuple(touched)
