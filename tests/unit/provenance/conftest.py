"""Fixtures for provenance tests: fixed clock, rewrite contexts, mocked collaborators."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import RewriteContext
from rewrite_provenance.provenance.clock import FixedClock

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
NOW = datetime(2024, 5, 1, 12, 3, 0, 250000, tzinfo=timezone.utc)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def merge_context():
    return RewriteContext(
        target=RecordId("Patient", "9"),
        source=RecordId("Patient", "8"),
        start_time=T0,
        job_id="job-1",
    )


@pytest.fixture
def replace_context():
    return RewriteContext(target=RecordId("Patient", "9"), start_time=T0)


@pytest.fixture
def audit_repository():
    repo = AsyncMock()
    repo.create = AsyncMock(return_value=RecordId("Provenance", "p-1", version="1"))
    return repo


@pytest.fixture
def logger():
    return MagicMock()
