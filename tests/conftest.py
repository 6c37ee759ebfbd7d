import io
import json
import urllib.error

import pytest

from core.config import ServerConfig


class FakeResponse:
    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body.encode()

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeOpener:
    """Stands in for urllib.request.urlopen and records every request."""

    def __init__(self, status: int = 200, body: object = None, error: Exception = None) -> None:
        self.status = status
        self.body = body if body is not None else {"id": "c1", "status": "queued"}
        self.error = error
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        text = self.body if isinstance(self.body, str) else json.dumps(self.body)
        if self.status >= 400:
            raise urllib.error.HTTPError(
                request.full_url, self.status, "error", {}, io.BytesIO(text.encode())
            )
        return FakeResponse(self.status, text)

    @property
    def payloads(self) -> list:
        return [json.loads(request.data) for request in self.requests]


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(vapi_api_key="test-key", assistant_id="assistant-123")


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture
def make_opener():
    return FakeOpener
