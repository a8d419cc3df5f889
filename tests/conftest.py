"""Pytest fixtures for testing"""

import httpx
import pytest
from fastapi.testclient import TestClient
from toolhub.api.main import create_app
from toolhub.api.dependencies import get_ip_info_client
from toolhub.infrastructure.clients.ip_info import IpInfoClient
from mock_services.ip_api.main import app as mock_ip_api_app

MOCK_IP_API_BASE = "http://ip-api.test"


@pytest.fixture
def ip_client() -> IpInfoClient:
    """IP client wired to the in-process mock IP API"""
    return IpInfoClient(
        base_url=MOCK_IP_API_BASE,
        transport=httpx.ASGITransport(app=mock_ip_api_app),
    )


@pytest.fixture
def client(ip_client: IpInfoClient) -> TestClient:
    """Create FastAPI test client with the mock IP API"""
    app = create_app()
    app.dependency_overrides[get_ip_info_client] = lambda: ip_client
    return TestClient(app)
