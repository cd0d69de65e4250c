"""Shared fixtures: clients wired to an in-process ``httpx.MockTransport``."""

import json
from collections.abc import Callable

import httpx
import pytest

from databricks_client import DatabricksClient, with_http_client

ACCOUNT = "acme"
BASE_URL = "https://acme.cloud.databricks.com/api/"


class RecordingTransport:
    """Answers every request with a fixed response and remembers the requests."""

    def __init__(self, status_code: int = 200, body: str | bytes | dict = b""):
        self.status_code = status_code
        self.body = json.dumps(body).encode() if isinstance(body, dict) else body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., tuple[DatabricksClient, RecordingTransport]]:
    """Build a client answering every request with the given status and body."""
    clients = []

    def _make(
        status_code: int = 200,
        body: str | bytes | dict = b"",
        *options,
    ) -> tuple[DatabricksClient, RecordingTransport]:
        transport = RecordingTransport(status_code, body)
        http_client = httpx.Client(transport=httpx.MockTransport(transport))
        client = DatabricksClient(ACCOUNT, with_http_client(http_client), *options)
        clients.append(http_client)
        return client, transport

    yield _make

    for http_client in clients:
        http_client.close()


@pytest.fixture
def failing_client() -> DatabricksClient:
    """A client whose transport cannot reach the server."""

    def handler(request: httpx.Request) -> httpx.Response:
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    yield DatabricksClient(ACCOUNT, with_http_client(http_client))
    http_client.close()
