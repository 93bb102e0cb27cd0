# scheduler_client/http_client.py
"""Timed POST client used for header-only trigger pings.

Unlike SchedulerRestClient this client never raises for request failures.
Each call returns a PostResult carrying the response body, the HTTP status
code, the error (if any) and any warnings raised while preparing the call.
Two implementations satisfy the HttpClient protocol: DefaultHttpClient talks
to the network, NoopHttpClient does nothing and is meant for tests.
"""

from collections.abc import Callable
from contextlib import closing
from dataclasses import dataclass
from typing import Protocol

import httpx

from scheduler_client.config import Settings, settings
from scheduler_client.duration import parse_duration
from scheduler_client.errors import (
    RequestConstructionError,
    SchedulerClientError,
    TransportError,
)
from scheduler_client.transport import (
    CONNECTION,
    CONNECTION_CLOSE,
    CONTENT_LENGTH,
    CONTENT_TYPE,
    check_target_url,
)

# Status code reported when no HTTP response was obtained
FAILURE_STATUS_CODE = 500

TimeoutClientFactory = Callable[[httpx.Timeout], httpx.Client]


@dataclass(frozen=True)
class PostResult:
    """Outcome of a timed POST.

    Attributes:
        body: Full response body (empty on failure).
        status_code: HTTP status code, or 500 when the call failed.
        error: Failure that prevented a response, None on success.
        warnings: Non-fatal problems met while preparing the call.
    """

    body: bytes = b""
    status_code: int = 0
    error: SchedulerClientError | None = None
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when a response was received, whatever its status code."""
        return self.error is None


class HttpClient(Protocol):
    """Protocol for timeout-bounded POST calls."""

    def post(
        self,
        url: str,
        content_type: str,
        content_length: int,
        timeout: str | None = None,
    ) -> PostResult:
        """Send a body-less POST.

        Args:
            url: Target URL.
            content_type: Value of the Content-Type header.
            content_length: Length the caller declares for the request.
            timeout: Duration string bounding the whole call (e.g., "5s").
                None selects the client's default timeout.

        Returns:
            PostResult with body, status code, error and warnings.
        """
        ...


def _default_client_factory(timeout: httpx.Timeout) -> httpx.Client:
    return httpx.Client(timeout=timeout)


def _failure(
    error: SchedulerClientError, cause: Exception, warnings: list[str]
) -> PostResult:
    error.__cause__ = cause
    return PostResult(
        status_code=FAILURE_STATUS_CODE, error=error, warnings=tuple(warnings)
    )


class DefaultHttpClient:
    """Network implementation of HttpClient.

    A timeout string that cannot be parsed does not abort the call: a warning
    is recorded and the call runs with the zero-value timeout, which means
    no timeout at all.

    The request carries no body, so the Content-Length on the wire is always
    0. A different declared length is reported as a warning.
    """

    def __init__(
        self,
        client_factory: TimeoutClientFactory | None = None,
        default_timeout: str = "5s",
    ) -> None:
        """Initialize the client.

        Args:
            client_factory: Callable building an httpx.Client for a given
                timeout. Defaults to httpx.Client(timeout=...).
            default_timeout: Duration used when a call passes no timeout.
        """
        self._client_factory = client_factory or _default_client_factory
        self._default_timeout = default_timeout

    @classmethod
    def from_settings(cls, config: Settings, **kwargs) -> "DefaultHttpClient":
        """Create a client whose default timeout is config.trigger_timeout."""
        return cls(default_timeout=config.trigger_timeout, **kwargs)

    @property
    def default_timeout(self) -> str:
        return self._default_timeout

    def post(
        self,
        url: str,
        content_type: str,
        content_length: int,
        timeout: str | None = None,
    ) -> PostResult:
        warnings: list[str] = []

        if timeout is None:
            timeout = self._default_timeout
        try:
            seconds = parse_duration(timeout)
        except ValueError as e:
            warnings.append(f"parse timeout duration error: {e}")
            seconds = 0.0

        if content_length != 0:
            warnings.append(
                f"declared content length {content_length} ignored: request has no body"
            )

        http_timeout = httpx.Timeout(seconds if seconds > 0 else None)
        headers = {
            CONTENT_TYPE: content_type,
            CONTENT_LENGTH: "0",
            CONNECTION: CONNECTION_CLOSE,
        }

        with closing(self._client_factory(http_timeout)) as client:
            try:
                request = client.build_request("POST", url, headers=headers)
                check_target_url(request.url)
            except (httpx.InvalidURL, TypeError, ValueError) as e:
                message = f"create new request occurs error: {e}"
                warnings.append(message)
                return _failure(RequestConstructionError(message, url=url), e, warnings)

            try:
                response = client.send(request)
            except httpx.UnsupportedProtocol as e:
                message = f"create new request occurs error: {e}"
                warnings.append(message)
                return _failure(RequestConstructionError(message, url=url), e, warnings)
            except Exception as e:
                # Includes protocol errors the HTTP stack raises unwrapped
                return _failure(
                    TransportError(f"POST {url} failed: {e}", url=url), e, warnings
                )

        return PostResult(
            body=response.content,
            status_code=response.status_code,
            warnings=tuple(warnings),
        )


class NoopHttpClient:
    """HttpClient that never touches the network."""

    def post(
        self,
        url: str,
        content_type: str,
        content_length: int,
        timeout: str | None = None,
    ) -> PostResult:
        return PostResult()


def new_default_http_client() -> HttpClient:
    """Create a DefaultHttpClient using the configured trigger timeout."""
    return DefaultHttpClient.from_settings(settings)


def new_noop_http_client() -> HttpClient:
    return NoopHttpClient()
