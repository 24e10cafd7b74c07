"""
Prometheus Metrics Middleware

Provides request/response metrics for monitoring:
- HTTP request latency
- Request count by endpoint and status
- Active request gauge
- Store query latency and failures per repository operation

Usage:
    from jobboard.middleware.metrics import setup_metrics

    app = FastAPI()
    setup_metrics(app)

Metrics Endpoint:
    GET /metrics - Prometheus-format metrics
"""

import time
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    CONTENT_TYPE_LATEST,
    generate_latest,
    REGISTRY,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

logger = logging.getLogger(__name__)

METRICS_PATH = "/metrics"

# ==================== Prometheus Metrics ====================

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of in-flight HTTP requests",
    ["method"]
)

STORE_QUERY_LATENCY = Histogram(
    "store_query_seconds",
    "Backing store operation latency",
    ["operation"],  # list_jobs, count_jobs, get_company_by_slug, ...
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

STORE_ERRORS = Counter(
    "store_errors_total",
    "Backing store operation failures",
    ["operation"]
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Request metrics labelled by route template.

    The endpoint label is the matched route's path pattern
    (``/api/jobs/{job_id}``), read from the request scope once routing
    has run. Unmatched requests fall back to the raw path.
    """

    def __init__(self, app: FastAPI, app_name: str = "jobboard"):
        super().__init__(app)
        self.app_name = app_name

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        method = request.method

        # Scrapes of /metrics are not counted
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        # Track in-flight requests
        ACTIVE_REQUESTS.labels(method=method).inc()

        # Start timing
        start_time = time.perf_counter()
        status = "500"

        try:
            response = await call_next(request)
            status = str(response.status_code)
        except Exception as e:
            logger.error(f"Request error on {request.url.path}: {e}")
            raise
        finally:
            duration = time.perf_counter() - start_time
            # Routing has run by now, so the matched route is in scope
            endpoint = route_template(request)

            REQUEST_LATENCY.labels(method=method, endpoint=endpoint, status=status).observe(duration)
            REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
            ACTIVE_REQUESTS.labels(method=method).dec()

        return response


def route_template(request: Request) -> str:
    """
    Path pattern of the route that handled ``request``.

    Uses the route FastAPI stores in the scope; otherwise the first app
    route that fully matches and exposes a ``path``; otherwise the raw
    URL path. Router entries without a ``path`` (included routers,
    mounts without one) are skipped.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if path:
        return path

    for candidate in request.app.routes:
        candidate_path = getattr(candidate, "path", None)
        if not candidate_path:
            continue
        match, _ = candidate.matches(request.scope)
        if match == Match.FULL:
            return candidate_path

    return request.url.path


def metrics_endpoint(request: Request) -> Response:
    """Prometheus text exposition of the default registry."""
    return PlainTextResponse(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )


def setup_metrics(app: FastAPI) -> None:
    """
    Configure Prometheus metrics for FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(PrometheusMiddleware, app_name="jobboard")
    app.add_route(METRICS_PATH, metrics_endpoint, methods=["GET"])

    logger.info("Prometheus metrics configured")


# ==================== Helper Functions ====================

def record_store_query_latency(operation: str, duration: float) -> None:
    STORE_QUERY_LATENCY.labels(operation=operation).observe(duration)


def record_store_error(operation: str) -> None:
    STORE_ERRORS.labels(operation=operation).inc()


@asynccontextmanager
async def track_store_query(operation: str) -> AsyncIterator[None]:
    """Time a store operation, counting it as an error if it raises."""
    start_time = time.perf_counter()
    try:
        yield
    except Exception:
        record_store_error(operation)
        raise
    finally:
        record_store_query_latency(operation, time.perf_counter() - start_time)
