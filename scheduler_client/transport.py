# scheduler_client/transport.py
"""HTTP transport executor shared by the resource client.

Every call opens a fresh httpx client, sends exactly one request, reads the
response body to completion and closes the client before returning, on both
success and error paths. HTTP status codes are not inspected: a 4xx/5xx
response without a transport failure is a completed call.
"""

import logging
from collections.abc import Callable
from contextlib import closing

import httpx

from scheduler_client.errors import RequestConstructionError, TransportError

logger = logging.getLogger(__name__)

# Common HTTP header constants
CONTENT_TYPE = "Content-Type"
CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE_JSON = "application/json"

CONNECTION = "Connection"
CONNECTION_CLOSE = "close"

# Plaintext HTTP only
SUPPORTED_SCHEMES = ("http",)

ClientFactory = Callable[[], httpx.Client]


def check_target_url(url: httpx.URL) -> None:
    """Reject URLs no HTTP transport can reach.

    Raises:
        ValueError: If the scheme is not http or the host is missing.
    """
    if url.scheme not in SUPPORTED_SCHEMES:
        raise ValueError(f"unsupported URL scheme {url.scheme!r}")
    if not url.host:
        raise ValueError("URL has no host")


class TransportExecutor:
    """Issues single GET/POST/PUT/DELETE round trips.

    Args:
        client_factory: Callable returning a new httpx.Client per call.
            Defaults to httpx.Client with the library's default timeout.
        owning_service: Name of the calling service, used to tag log records.
    """

    BODY_METHODS = frozenset({"POST", "PUT"})

    def __init__(
        self,
        client_factory: ClientFactory | None = None,
        owning_service: str = "",
    ) -> None:
        self._client_factory = client_factory or httpx.Client
        self._owning_service = owning_service

    def get(self, url: str) -> bytes:
        """Issue a GET and return the raw response body.

        Args:
            url: Absolute request URL.

        Returns:
            Full response body.

        Raises:
            RequestConstructionError: If the request cannot be built.
            TransportError: If the round trip fails.
        """
        return self._send("GET", url).content

    def post_like(self, method: str, url: str, body: bytes) -> None:
        """Issue a POST or PUT with a JSON body, discarding the response.

        Args:
            method: "POST" or "PUT".
            url: Absolute request URL.
            body: Serialized JSON payload.

        Raises:
            ValueError: If method is not POST or PUT.
            RequestConstructionError: If the request cannot be built.
            TransportError: If the round trip fails.
        """
        verb = method.upper()
        if verb not in self.BODY_METHODS:
            raise ValueError(f"post_like supports POST and PUT, got {method!r}")
        self._send(verb, url, content=body, headers={CONTENT_TYPE: CONTENT_TYPE_JSON})

    def delete(self, url: str) -> None:
        """Issue a DELETE, discarding the response.

        Raises:
            RequestConstructionError: If the request cannot be built.
            TransportError: If the round trip fails.
        """
        self._send("DELETE", url)

    def _send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request_headers = {CONNECTION: CONNECTION_CLOSE}
        if headers:
            request_headers.update(headers)

        with closing(self._client_factory()) as client:
            try:
                request = client.build_request(
                    method, url, content=content, headers=request_headers
                )
                check_target_url(request.url)
            except (httpx.InvalidURL, TypeError, ValueError) as e:
                raise RequestConstructionError(
                    f"create {method} request for {url} failed: {e}", url=url
                ) from e

            try:
                # stream=False reads the body to completion and closes the response
                response = client.send(request)
            except httpx.UnsupportedProtocol as e:
                raise RequestConstructionError(
                    f"create {method} request for {url} failed: {e}", url=url
                ) from e
            except (httpx.TransportError, httpx.StreamError) as e:
                raise TransportError(f"{method} {url} failed: {e}", url=url) from e

        logger.debug(
            "%s %s -> %d",
            method,
            url,
            response.status_code,
            extra={
                "owning_service": self._owning_service,
                "method": method,
                "url": url,
                "status_code": response.status_code,
            },
        )
        return response
