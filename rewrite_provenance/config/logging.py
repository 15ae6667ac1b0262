# rewrite_provenance/config/logging.py

import json
import logging
from datetime import datetime, timezone

from rewrite_provenance.core.context import correlation_id_ctx, job_id_ctx

# Attributes every LogRecord carries; anything else arrived through extra=.
_RESERVED = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "correlation_id": correlation_id_ctx.get(),
            "job_id": job_id_ctx.get(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and log_record.get(key) is None:
                log_record[key] = value
        return json.dumps(log_record, default=str)


def configure_logging(log_level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
