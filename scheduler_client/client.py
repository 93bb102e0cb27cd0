# scheduler_client/client.py
"""REST client for schedules and schedule events.

Provides typed CRUD operations against the scheduler service. Each operation
builds its URL, (de)serializes the entity, and delegates the round trip to a
TransportExecutor. Errors are raised to the caller as they occur; nothing is
retried or logged here.
"""

from typing import Protocol

from scheduler_client.config import Settings
from scheduler_client.errors import RequestConstructionError
from scheduler_client.models import (
    Schedule,
    ScheduleEvent,
    decode_entity,
    encode_entity,
)
from scheduler_client.transport import ClientFactory, TransportExecutor

SCHEDULE_API_PATH = "/api/v1/schedule"
SCHEDULE_EVENT_API_PATH = "/api/v1/scheduleevent"
URL_PATTERN = "http://{host}:{port}{path}"


class SchedulerClient(Protocol):
    """Operations offered by a scheduler service client."""

    def query_schedule(self, schedule_id: str) -> Schedule: ...

    def query_schedule_with_name(self, schedule_name: str) -> Schedule: ...

    def add_schedule(self, schedule: Schedule) -> None: ...

    def update_schedule(self, schedule: Schedule) -> None: ...

    def remove_schedule(self, schedule_id: str) -> None: ...

    def query_schedule_event(self, event_id: str) -> ScheduleEvent: ...

    def add_schedule_event(self, schedule_event: ScheduleEvent) -> None: ...

    def update_schedule_event(self, schedule_event: ScheduleEvent) -> None: ...

    def remove_schedule_event(self, event_id: str) -> None: ...


def _require_segment(value: str, label: str) -> str:
    if not isinstance(value, str) or not value:
        raise RequestConstructionError(f"{label} must be a non-empty string")
    return value


class SchedulerRestClient:
    """HTTP implementation of SchedulerClient.

    Configuration is fixed at construction, so one instance can be shared
    across threads.

    Attributes:
        host: Scheduler service host name.
        port: Scheduler service port.
        owning_service: Name of the service using this client.
    """

    def __init__(
        self,
        host: str,
        port: int,
        owning_service: str = "",
        *,
        executor: TransportExecutor | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            host: Scheduler service host name.
            port: Scheduler service port.
            owning_service: Name of the service using this client.
            executor: Transport executor to use. Built from client_factory
                when omitted.
            client_factory: Optional httpx.Client factory for the default
                executor (e.g., to inject a mock transport).
        """
        self._host = host
        self._port = port
        self._owning_service = owning_service
        self._executor = executor or TransportExecutor(
            client_factory=client_factory, owning_service=owning_service
        )

    @classmethod
    def from_settings(cls, config: Settings, **kwargs) -> "SchedulerRestClient":
        """Create a client from application settings.

        Args:
            config: Settings instance providing host, port and owning service.
            **kwargs: Passed through to the constructor.

        Returns:
            Configured SchedulerRestClient.
        """
        return cls(
            config.scheduler_service_host,
            config.scheduler_service_port,
            config.owning_service,
            **kwargs,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def owning_service(self) -> str:
        return self._owning_service

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return URL_PATTERN.format(host=self._host, port=self._port, path=path)

    def schedules_url(self) -> str:
        """URL of the schedule collection."""
        return self._url(SCHEDULE_API_PATH)

    def schedule_url(self, schedule_id: str) -> str:
        """URL of one schedule."""
        return f"{self.schedules_url()}/{_require_segment(schedule_id, 'schedule id')}"

    def schedule_name_url(self, schedule_name: str) -> str:
        """URL of a schedule looked up by name."""
        name = _require_segment(schedule_name, "schedule name")
        return f"{self.schedules_url()}/name/{name}"

    def schedule_events_url(self) -> str:
        """URL of the schedule event collection."""
        return self._url(SCHEDULE_EVENT_API_PATH)

    def schedule_event_url(self, event_id: str) -> str:
        """URL of one schedule event."""
        segment = _require_segment(event_id, "schedule event id")
        return f"{self.schedule_events_url()}/{segment}"

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------

    def query_schedule(self, schedule_id: str) -> Schedule:
        """Fetch a schedule by identifier.

        Args:
            schedule_id: Schedule identifier.

        Returns:
            The decoded Schedule.

        Raises:
            RequestConstructionError: If the id is empty or the URL is invalid.
            TransportError: If the round trip fails.
            DecodeError: If the body is not a Schedule document.
        """
        url = self.schedule_url(schedule_id)
        return decode_entity(Schedule, self._executor.get(url), url=url)

    def query_schedule_with_name(self, schedule_name: str) -> Schedule:
        """Fetch a schedule by name.

        Raises:
            RequestConstructionError: If the name is empty or the URL is invalid.
            TransportError: If the round trip fails.
            DecodeError: If the body is not a Schedule document.
        """
        url = self.schedule_name_url(schedule_name)
        return decode_entity(Schedule, self._executor.get(url), url=url)

    def add_schedule(self, schedule: Schedule) -> None:
        """Create a schedule on the server.

        The identifier assigned by the server is not read back.

        Raises:
            EncodeError: If the schedule cannot be serialized.
            RequestConstructionError: If the URL is invalid.
            TransportError: If the round trip fails.
        """
        body = encode_entity(schedule)
        self._executor.post_like("POST", self.schedules_url(), body)

    def update_schedule(self, schedule: Schedule) -> None:
        """Update a schedule; the server locates it by the embedded id."""
        body = encode_entity(schedule)
        self._executor.post_like("PUT", self.schedules_url(), body)

    def remove_schedule(self, schedule_id: str) -> None:
        """Delete a schedule by identifier."""
        url = self.schedule_url(schedule_id)
        self._executor.delete(url)

    # ------------------------------------------------------------------
    # Schedule events
    # ------------------------------------------------------------------

    def query_schedule_event(self, event_id: str) -> ScheduleEvent:
        """Fetch a schedule event by identifier.

        Raises:
            RequestConstructionError: If the id is empty or the URL is invalid.
            TransportError: If the round trip fails.
            DecodeError: If the body is not a ScheduleEvent document.
        """
        url = self.schedule_event_url(event_id)
        return decode_entity(ScheduleEvent, self._executor.get(url), url=url)

    def add_schedule_event(self, schedule_event: ScheduleEvent) -> None:
        """Create a schedule event on the server.

        Serialization happens first, so an unencodable event never reaches
        the network.
        """
        body = encode_entity(schedule_event)
        self._executor.post_like("POST", self.schedule_events_url(), body)

    def update_schedule_event(self, schedule_event: ScheduleEvent) -> None:
        body = encode_entity(schedule_event)
        self._executor.post_like("PUT", self.schedule_events_url(), body)

    def remove_schedule_event(self, event_id: str) -> None:
        url = self.schedule_event_url(event_id)
        self._executor.delete(url)


def new_scheduler_rest_client(
    host: str, port: int, owning_service: str = ""
) -> SchedulerClient:
    """Create a SchedulerClient talking to host:port."""
    return SchedulerRestClient(host, port, owning_service)
