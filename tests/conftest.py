"""Pytest fixtures for audit trail tests."""

import pytest
from fastapi.testclient import TestClient

from audit_trail.dependencies import get_version_store
from audit_trail.main import app
from audit_trail.middleware.rate_limit import limiter
from audit_trail.services.version_store import VersionStore


@pytest.fixture
def store() -> VersionStore:
    """Fresh, empty version store."""
    return VersionStore()


@pytest.fixture
def client(store: VersionStore):
    """Test client wired to the per-test store."""
    app.dependency_overrides[get_version_store] = lambda: store
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
