"""
Pytest fixtures for SIGO gateway tests
"""

import logging
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from sigo_gateway.config import Settings
from sigo_gateway.main import create_app
from sigo_gateway.services.backend_gateway import BackendGateway

LOCAL_BACKEND_URL = "https://localhost:7241/api"


@pytest.fixture(autouse=True)
def gateway_logs_reach_caplog():
    """The configured gateway logger does not propagate; caplog listens on the root logger"""
    gateway_logger = logging.getLogger("sigo_gateway")
    previous = gateway_logger.propagate
    gateway_logger.propagate = True
    yield
    gateway_logger.propagate = previous


@pytest.fixture
def local_settings() -> Settings:
    """Development settings pointing at the local HTTPS backend"""
    return Settings(backend_url=LOCAL_BACKEND_URL, environment="development")


@pytest.fixture
def production_settings() -> Settings:
    """Production settings with the same local backend"""
    return Settings(backend_url=LOCAL_BACKEND_URL, environment="production")


@pytest.fixture
def backend_requests() -> List[httpx.Request]:
    """Requests seen by the mocked backend"""
    return []


@pytest.fixture
def make_gateway(local_settings, backend_requests) -> Callable[..., BackendGateway]:
    """Build a gateway whose backend is answered by `handler`"""

    def _make(handler, settings: Settings = None) -> BackendGateway:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            backend_requests.append(request)
            return handler(request)

        return BackendGateway(settings or local_settings, transport=httpx.MockTransport(_recording_handler))

    return _make


@pytest.fixture
def make_client(local_settings, make_gateway) -> Callable[..., TestClient]:
    """Build a TestClient for an app wired to a mocked backend"""

    def _make(handler, settings: Settings = None) -> TestClient:
        settings = settings or local_settings
        app = create_app(settings=settings, gateway=make_gateway(handler, settings))
        return TestClient(app)

    return _make


@pytest.fixture
def envelope_handler():
    """Backend answering every call with an empty camelCase envelope"""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"code": 200, "message": None, "data": []})

    return _handler
