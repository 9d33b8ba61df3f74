# codegate/lib/monitoring.py
from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_client.registry import CollectorRegistry as Registry
from prometheus_fastapi_instrumentator import Instrumentator

from codegate.core.logging import log

# Create a separate registry
registry = Registry()

validations_total = Counter(
    "codegate_validations_total",
    "Snippets validated, by framework and outcome",
    ["framework", "outcome"],
    registry=registry,
)

validation_findings_total = Counter(
    "codegate_validation_findings_total",
    "Errors and warnings emitted, by framework and severity",
    ["framework", "severity"],
    registry=registry,
)


def record_validation(framework: str, valid: bool, error_count: int, warning_count: int) -> None:
    """Count one finished validation."""
    validations_total.labels(framework=framework, outcome="valid" if valid else "invalid").inc()
    if error_count:
        validation_findings_total.labels(framework=framework, severity="error").inc(error_count)
    if warning_count:
        validation_findings_total.labels(framework=framework, severity="warning").inc(warning_count)


def register_monitoring(app: FastAPI):
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.
    """
    instrumentator = Instrumentator(
        excluded_handlers=["/metrics"],  # Don't monitor the metrics endpoint itself
        registry=registry
    ).instrument(app)

    instrumentator.expose(app, include_in_schema=False, should_gzip=True)

    log("MONITORING", "Prometheus instrumentation registered at /metrics.")
