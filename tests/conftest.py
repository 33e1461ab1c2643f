"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from track_api.index import create_app  # noqa: E402
from track_api.tracking.store import RouteStore  # noqa: E402
from track_api.utils.settings import Settings  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty route store"""
    return RouteStore()


@pytest.fixture
def app(store):
    """Application wired to the test's store, with default settings"""
    return create_app(store=store, settings=Settings())


@pytest.fixture
def client(app):
    """Create a test client"""
    with TestClient(app) as test_client:
        yield test_client
