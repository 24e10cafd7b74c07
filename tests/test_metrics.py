"""
Tests for Prometheus request and store instrumentation.

Tests cover:
- Route template resolution for endpoint labels
- Router entries that carry no path
- Requests to included-router endpoints passing through the middleware
- Store query error counting
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY
from starlette.requests import Request
from starlette.routing import Route

from jobboard.main import create_app
from jobboard.middleware.metrics import route_template, track_store_query


def _request(path: str, routes, route=None) -> Request:
    class _App:
        pass

    app = _App()
    app.routes = routes
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": [],
        "app": app,
    }
    if route is not None:
        scope["route"] = route
    return Request(scope)


def _endpoint(request):
    return None


class _RouterEntryWithoutPath:
    """Stands in for router entries (such as included routers) that expose no ``path``."""

    def matches(self, scope):
        raise AssertionError("entries without a path are never matched")


def _count(method: str, status: str) -> float:
    total = 0.0
    for metric in REGISTRY.collect():
        if metric.name != "http_requests":
            continue
        for sample in metric.samples:
            if (
                sample.name == "http_requests_total"
                and sample.labels.get("method") == method
                and sample.labels.get("status") == status
            ):
                total += sample.value
    return total


class TestRouteTemplate:

    def test_uses_route_from_scope(self):
        route = Route("/api/jobs/{job_id}", _endpoint)

        request = _request("/api/jobs/abc", routes=[], route=route)

        assert route_template(request) == "/api/jobs/{job_id}"

    def test_skips_entries_without_path(self):
        routes = [_RouterEntryWithoutPath(), Route("/api/companies/{slug}", _endpoint)]

        request = _request("/api/companies/acme", routes=routes)

        assert route_template(request) == "/api/companies/{slug}"

    def test_falls_back_to_url_path(self):
        request = _request("/nowhere", routes=[_RouterEntryWithoutPath()])

        assert route_template(request) == "/nowhere"


@pytest_asyncio.fixture
async def client(settings, session_factory):
    app = create_app(settings=settings, session_factory=session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_included_router_endpoints_are_served_and_counted(self, client):
        before_ok = _count("GET", "200")
        before_missing = _count("GET", "404")

        listing = await client.get("/api/jobs")
        missing = await client.get("/api/jobs/missing")

        assert listing.status_code == 200
        assert missing.status_code == 404
        assert _count("GET", "200") == before_ok + 1
        assert _count("GET", "404") == before_missing + 1

    @pytest.mark.asyncio
    async def test_metrics_scrape_is_not_counted(self, client):
        before = _count("GET", "200")

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert _count("GET", "200") == before


class TestTrackStoreQuery:

    @pytest.mark.asyncio
    async def test_failure_counts_error(self):
        labels = {"operation": "test_operation"}
        before = REGISTRY.get_sample_value("store_errors_total", labels) or 0.0

        with pytest.raises(RuntimeError):
            async with track_store_query("test_operation"):
                raise RuntimeError("boom")

        assert REGISTRY.get_sample_value("store_errors_total", labels) == before + 1
        assert REGISTRY.get_sample_value("store_query_seconds_count", labels) >= 1
