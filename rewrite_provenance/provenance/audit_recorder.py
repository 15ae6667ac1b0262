"""Audit recorder: entry point for the job framework once a rewrite has finished."""

import asyncio
import logging
import time
from typing import Iterable, Optional

from rewrite_provenance.config.settings import get_settings
from rewrite_provenance.domain.models.audit_record import AuditRecord
from rewrite_provenance.domain.models.record_id import RecordId
from rewrite_provenance.domain.models.rewrite import RewriteContext, SubOperationOutcome
from rewrite_provenance.observability.metrics import MetricsCollector
from rewrite_provenance.provenance.audit_repository import AuditRepository
from rewrite_provenance.provenance.classification import AdministrativeClassification
from rewrite_provenance.provenance.clock import Clock, SystemClock
from rewrite_provenance.provenance.exceptions import AuditPersistFailure, AuditPersistTimeout
from rewrite_provenance.provenance.record_builder import RecordBuilder
from rewrite_provenance.provenance.result_collector import extract_touched


class AuditRecorder:
    """
    Orchestration only: collect touched records, build the record, persist it.
    Failure contract: InvalidOperationContext propagates unchanged and nothing is
    persisted; any repository failure surfaces as AuditPersistFailure carrying the
    built record. Nothing is retried here.
    """

    def __init__(
        self,
        repository: AuditRepository,
        clock: Optional[Clock] = None,
        builder: Optional[RecordBuilder] = None,
        logger: Optional[logging.Logger] = None,
        metrics: Optional[MetricsCollector] = None,
        persist_timeout_seconds: Optional[float] = None,
    ) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()
        self._builder = builder or RecordBuilder()
        self._logger = logger or logging.getLogger(__name__)
        self._metrics = metrics
        self._persist_timeout = persist_timeout_seconds

    @classmethod
    def from_settings(
        cls,
        repository: AuditRepository,
        metrics: Optional[MetricsCollector] = None,
    ) -> "AuditRecorder":
        """Recorder wired from AppSettings: reason code, record type, persist timeout."""
        settings = get_settings()
        builder = RecordBuilder(
            classification=AdministrativeClassification.from_settings(),
            record_type=settings.audit_record_type,
        )
        return cls(
            repository=repository,
            builder=builder,
            metrics=metrics if settings.enable_metrics else None,
            persist_timeout_seconds=settings.persist_timeout_seconds,
        )

    async def record_rewrite(
        self,
        context: RewriteContext,
        batches: Iterable[Iterable[SubOperationOutcome]],
    ) -> RecordId:
        """Record one completed rewrite. Returns the id of the persisted audit record."""
        touched = extract_touched(batches)
        record = self._builder.build(context, touched, self._clock.now())
        self._logger.info(
            "audit_record_built",
            extra={
                "job_id": context.job_id,
                "target": context.target.reference,
                "is_merge": context.is_merge,
                "touched_count": len(touched),
            },
        )
        if self._metrics is not None:
            self._metrics.increment(
                "touched_records",
                float(len(touched)),
                category="merge" if context.is_merge else "replace",
            )
        return await self.persist(record, job_id=context.job_id)

    async def persist(self, record: AuditRecord, *, job_id: Optional[str] = None) -> RecordId:
        """
        Store an already-built record. Also the retry path after AuditPersistFailure:
        pass `failure.record` back in without recomputing anything.
        """
        started = time.perf_counter()
        try:
            if self._persist_timeout is None:
                persisted_id = await self._repository.create(record)
            else:
                persisted_id = await asyncio.wait_for(
                    self._repository.create(record), timeout=self._persist_timeout
                )
        except asyncio.TimeoutError as e:
            self._on_failure(job_id, e)
            raise AuditPersistTimeout(
                f"Audit persist timed out: {e!r}", record
            ) from e
        except Exception as e:
            self._on_failure(job_id, e)
            raise AuditPersistFailure(f"Audit persist failed: {e}", record) from e

        latency_ms = (time.perf_counter() - started) * 1000
        if self._metrics is not None:
            self._metrics.increment("audit_records_persisted")
            self._metrics.observe_latency("audit_persist_latency_ms", latency_ms)
        self._logger.info(
            "audit_record_persisted",
            extra={
                "job_id": job_id,
                "audit_record_id": persisted_id.reference,
                "target_count": len(record.targets),
            },
        )
        return persisted_id

    def _on_failure(self, job_id: Optional[str], error: BaseException) -> None:
        if self._metrics is not None:
            self._metrics.increment("audit_persist_failures")
        self._logger.error(
            "audit_persist_failed",
            extra={"job_id": job_id, "error": str(error)},
        )
