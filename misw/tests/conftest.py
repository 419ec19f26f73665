"""
Pytest fixtures for misw tests.

HTTP calls go through a real requests.Session whose transport adapter
forwards to the FastAPI fake service via its TestClient, so the client
code under test is exercised end to end without a network.
"""

import io

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from fastapi.testclient import TestClient

from ..api import ApiClient
from ..terminal import Terminal
from .fake_service import BASE_URL, PASSWORD, USERNAME, FakeGameService


class ASGIAdapter(BaseAdapter):
    """requests transport adapter that serves requests from an ASGI app."""

    def __init__(self, app):
        super().__init__()
        self.client = TestClient(app)

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        result = self.client.request(
            request.method,
            request.url,
            content=request.body,
            headers=dict(request.headers),
        )
        response = requests.Response()
        response.status_code = result.status_code
        response.reason = result.reason_phrase
        response.headers = CaseInsensitiveDict(result.headers)
        response._content = result.content
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        self.client.close()


class RefusingAdapter(BaseAdapter):
    """Adapter that fails every request as if the server were down."""

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        raise requests.ConnectionError(f"Connection refused: {request.url}")

    def close(self):
        pass


@pytest.fixture
def service() -> FakeGameService:
    """Fresh fake service with one known user."""
    fake = FakeGameService()
    fake.add_user(USERNAME, PASSWORD)
    return fake


@pytest.fixture
def http(service):
    """requests.Session routed to the fake service."""
    session = requests.Session()
    session.mount(BASE_URL, ASGIAdapter(service.create_app()))
    yield session
    session.close()


@pytest.fixture
def offline_http():
    """requests.Session whose every request fails to connect."""
    session = requests.Session()
    session.mount(BASE_URL, RefusingAdapter())
    yield session
    session.close()


@pytest.fixture
def client(http) -> ApiClient:
    """Credentialed client for the known user."""
    return ApiClient.with_credentials(BASE_URL, USERNAME, PASSWORD, http=http)


@pytest.fixture
def make_terminal():
    """Build a Terminal that reads the given lines and records its output."""
    def _make(*lines: str) -> Terminal:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return Terminal(stdin=stdin, stdout=io.StringIO())
    return _make
