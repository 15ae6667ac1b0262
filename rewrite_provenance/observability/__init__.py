"""Observability layer: in-process metrics. No external SaaS."""

from rewrite_provenance.observability.metrics import MetricsCollector

__all__ = ["MetricsCollector"]
