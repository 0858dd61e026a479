import json

import httpx
import pytest

from bugreports.http import BugReportClient


@pytest.fixture
def credentials():
    """Credenciales válidas para construir el cliente."""
    return {
        "api_url": "https://api.test.com",
        "app_name": "TestApp",
        "app_key": "test-key",
        "app_secret": "test-secret",
    }


@pytest.fixture
def sample_report():
    """Payload de ejemplo de un bug report válido."""
    return {
        "title": "Test Bug",
        "description": "This is a test bug report",
        "severity": "HIGH",
        "tags": ["UI", "FUNCTIONALITY"],
        "image": ["base64-encoded-image"],
        "metadata": {
            "browser": "Chrome",
            "version": "1.0.0",
        },
    }


@pytest.fixture
def report_body():
    """Body de respuesta exitosa del API para un reporte."""
    return {
        "meta": {
            "code": 200,
            "status": "success",
            "message": "Bug report submitted",
        },
        "data": {
            "id": "123",
            "status": "SUBMITTED",
            "createdAt": "2026-01-23T10:30:00Z",
        },
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport que guarda los requests recibidos."""

    def __init__(self, status_code=200, body=None, raise_exc=None):
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if raise_exc is not None:
                raise raise_exc(request)
            if body is None:
                return httpx.Response(status_code)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, content=json.dumps(body).encode())

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client(credentials):
    """Fábrica de (cliente, transporte) con el API mockeado."""
    def _make(status_code=200, body=None, raise_exc=None, **kwargs):
        transport = RecordingTransport(status_code, body, raise_exc)
        client = BugReportClient(**credentials, transport=transport, **kwargs)
        return client, transport
    return _make
