"""
Middleware Package

Contains FastAPI middleware for:
- Prometheus metrics collection
- Store query instrumentation
"""

from jobboard.middleware.metrics import (
    PrometheusMiddleware,
    route_template,
    setup_metrics,
    track_store_query,
    REQUEST_LATENCY,
    REQUEST_COUNT,
    ACTIVE_REQUESTS,
    STORE_QUERY_LATENCY,
    STORE_ERRORS,
)

__all__ = [
    "PrometheusMiddleware",
    "route_template",
    "setup_metrics",
    "track_store_query",
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "STORE_QUERY_LATENCY",
    "STORE_ERRORS",
]
