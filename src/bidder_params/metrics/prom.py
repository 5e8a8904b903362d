from __future__ import annotations
from prometheus_client import Counter, Gauge

SCHEMAS_LOADED = Gauge("bidder_params_schemas_loaded", "Bidder param schemas bound by the last successful load")
LOAD_FAILURES = Counter("bidder_params_load_failures_total", "Failed validator constructions", ["reason"])


def mark_failure(reason: str) -> None:
    LOAD_FAILURES.labels(reason=reason).inc()
