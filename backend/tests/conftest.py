"""
Pytest configuration and fixtures for SEO audit tests.
"""
import copy
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

# Known service token for the API tests
os.environ["INTERNAL_SERVICE_TOKEN"] = "test-service-token"
os.environ["SERVICE_AUTH_ENABLED"] = "true"

from fixtures.sample_snapshots import (
    FIXED_TIMESTAMP,
    PAGE_URL,
    PERFECT_SNAPSHOT,
    POOR_SNAPSHOT,
)
from seoaudit.services.snapshot import PageSnapshot, create_snapshot
from seoaudit.services.audit_engine import SEOAuditEngine

SERVICE_TOKEN = "test-service-token"


# ============================================================================
# Snapshot Fixtures
# ============================================================================

@pytest.fixture
def page_url() -> str:
    return PAGE_URL


@pytest.fixture
def fixed_timestamp() -> str:
    return FIXED_TIMESTAMP


@pytest.fixture
def perfect_snapshot_data() -> dict:
    """Mutable copy of the perfect page snapshot."""
    return copy.deepcopy(PERFECT_SNAPSHOT)


@pytest.fixture
def poor_snapshot_data() -> dict:
    """Mutable copy of the poor page snapshot."""
    return copy.deepcopy(POOR_SNAPSHOT)


@pytest.fixture
def perfect_snapshot(perfect_snapshot_data) -> PageSnapshot:
    return create_snapshot(perfect_snapshot_data)


@pytest.fixture
def poor_snapshot(poor_snapshot_data) -> PageSnapshot:
    return create_snapshot(poor_snapshot_data)


@pytest.fixture
def engine() -> SEOAuditEngine:
    """Engine with default thresholds."""
    return SEOAuditEngine()


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def app() -> FastAPI:
    """FastAPI application under test."""
    from seoaudit.main import app as fastapi_app

    return fastapi_app


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def service_headers() -> dict:
    """Headers carrying the configured service token."""
    return {"X-Service-Token": SERVICE_TOKEN}


def to_camel_payload(snapshot_data: dict) -> dict:
    """Convert a snake_case snapshot dict into the camelCase API payload."""
    from pydantic.alias_generators import to_camel

    def convert(value):
        if isinstance(value, dict):
            return {to_camel(k): convert(v) for k, v in value.items()}
        if isinstance(value, list):
            return [convert(v) for v in value]
        return value

    payload = convert(snapshot_data)
    timing = payload.get("navigationTiming")
    if timing:
        payload["navigationTiming"] = {
            "domContentLoadedEventStart": timing["domContentLoadedStart"],
            "domContentLoadedEventEnd": timing["domContentLoadedEnd"],
            "loadEventStart": timing["loadEventStart"],
            "loadEventEnd": timing["loadEventEnd"],
            "domInteractive": timing["domInteractive"],
        }
    return payload


@pytest.fixture
def perfect_payload(perfect_snapshot_data) -> dict:
    return {"url": PAGE_URL, "snapshot": to_camel_payload(perfect_snapshot_data)}


@pytest.fixture
def poor_payload(poor_snapshot_data) -> dict:
    return {"url": "https://example.com/", "snapshot": to_camel_payload(poor_snapshot_data)}
