"""Client library for the scheduler service.

Provides:
- SchedulerRestClient: CRUD for schedules and schedule events
- DefaultHttpClient / NoopHttpClient: timed POST for trigger pings
- Schedule, ScheduleEvent, Addressable domain models
- The SchedulerClientError family of errors
"""

from scheduler_client.client import (
    SchedulerClient,
    SchedulerRestClient,
    new_scheduler_rest_client,
)
from scheduler_client.config import Settings, settings
from scheduler_client.duration import parse_duration
from scheduler_client.errors import (
    DecodeError,
    EncodeError,
    RequestConstructionError,
    SchedulerClientError,
    TransportError,
)
from scheduler_client.http_client import (
    DefaultHttpClient,
    HttpClient,
    NoopHttpClient,
    PostResult,
    new_default_http_client,
    new_noop_http_client,
)
from scheduler_client.models import (
    Addressable,
    Schedule,
    ScheduleEvent,
    decode_entity,
    encode_entity,
)
from scheduler_client.transport import TransportExecutor

__version__ = "0.1.0"

__all__ = [
    "Addressable",
    "DecodeError",
    "DefaultHttpClient",
    "EncodeError",
    "HttpClient",
    "NoopHttpClient",
    "PostResult",
    "RequestConstructionError",
    "Schedule",
    "ScheduleEvent",
    "SchedulerClient",
    "SchedulerClientError",
    "SchedulerRestClient",
    "Settings",
    "TransportError",
    "TransportExecutor",
    "decode_entity",
    "encode_entity",
    "new_default_http_client",
    "new_noop_http_client",
    "new_scheduler_rest_client",
    "parse_duration",
    "settings",
]
