# tests/conftest.py
"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- A fake scheduler service built on httpx.MockTransport
- httpx clients that count close() calls
- Ready-made SchedulerRestClient and DefaultHttpClient instances
- A real loopback HTTP server for checks the mock transport cannot make
"""

import socket
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, HTTPServer

import httpx
import pytest

from scheduler_client.client import SchedulerRestClient
from scheduler_client.http_client import DefaultHttpClient


class RecordingClient(httpx.Client):
    """httpx.Client that counts how often it is closed."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


@dataclass
class FakeScheduler:
    """Canned scheduler service.

    Records every request it receives and every client created to reach it.
    Set ``error`` to make the transport raise instead of responding.
    """

    status_code: int = 200
    body: bytes = b""
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)
    clients: list[RecordingClient] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    def client_factory(self) -> httpx.Client:
        client = RecordingClient(transport=httpx.MockTransport(self.handler))
        self.clients.append(client)
        return client

    def timed_client_factory(self, timeout: httpx.Timeout) -> httpx.Client:
        client = RecordingClient(
            transport=httpx.MockTransport(self.handler), timeout=timeout
        )
        self.clients.append(client)
        return client

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Fresh fake scheduler service with a 200/empty default response."""
    return FakeScheduler()


@pytest.fixture
def rest_client(fake_scheduler: FakeScheduler) -> SchedulerRestClient:
    """SchedulerRestClient wired to the fake scheduler service."""
    return SchedulerRestClient(
        "scheduler",
        48085,
        "device-virtual",
        client_factory=fake_scheduler.client_factory,
    )


@pytest.fixture
def timed_client(fake_scheduler: FakeScheduler) -> DefaultHttpClient:
    """DefaultHttpClient wired to the fake scheduler service."""
    return DefaultHttpClient(client_factory=fake_scheduler.timed_client_factory)


class _LoopbackHandler(BaseHTTPRequestHandler):
    """Reads the declared request body and answers 200 "ok" (204 for DELETE)."""

    def _record(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        self.server.received.append(
            {
                "method": self.command,
                "path": self.path,
                "headers": {k.lower(): v for k, v in self.headers.items()},
                "body": body,
            }
        )

    def do_POST(self) -> None:
        self._record()
        self.send_response(200)
        self.send_header("Content-Length", "2")
        self.end_headers()
        self.wfile.write(b"ok")

    do_PUT = do_POST

    def do_DELETE(self) -> None:
        self._record()
        self.send_response(204)
        self.end_headers()

    def log_message(self, format, *args) -> None:
        pass


@pytest.fixture
def loopback_server():
    """Real HTTP/1.1 server on 127.0.0.1, recording what it receives."""
    server = HTTPServer(("127.0.0.1", 0), _LoopbackHandler)
    server.received = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def closed_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
