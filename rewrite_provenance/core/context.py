# rewrite_provenance/core/context.py

import contextvars
from contextlib import contextmanager
from typing import Iterator, Optional

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
job_id_ctx = contextvars.ContextVar("job_id", default=None)


@contextmanager
def bind_job_context(
    job_id: Optional[str], correlation_id: Optional[str] = None
) -> Iterator[None]:
    """Set job/correlation ids for log lines emitted inside the block."""
    job_token = job_id_ctx.set(job_id)
    corr_token = correlation_id_ctx.set(correlation_id)
    try:
        yield
    finally:
        correlation_id_ctx.reset(corr_token)
        job_id_ctx.reset(job_token)
