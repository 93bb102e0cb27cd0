# scheduler_client/errors.py
"""Error types raised by the scheduler client.

Every failure is reported as a subclass of SchedulerClientError so callers
can catch the whole family or a single kind:

- TransportError: connection, DNS, timeout or read failures
- RequestConstructionError: malformed URL or request build failure
- EncodeError: an entity could not be serialized to JSON
- DecodeError: a response body could not be decoded into an entity
"""


class SchedulerClientError(Exception):
    """Base class for all scheduler client errors."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class TransportError(SchedulerClientError):
    """Raised when the HTTP round trip itself fails."""


class RequestConstructionError(SchedulerClientError):
    """Raised when a request cannot be built."""


class EncodeError(SchedulerClientError):
    """Raised when an outgoing entity cannot be serialized."""


class DecodeError(SchedulerClientError):
    """Raised when an incoming body cannot be decoded.

    The raw body is kept on the error for inspection.
    """

    def __init__(self, message: str, url: str | None = None, body: bytes = b""):
        super().__init__(message, url)
        self.body = body
