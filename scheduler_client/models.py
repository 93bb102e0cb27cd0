# scheduler_client/models.py
"""Domain models exchanged with the scheduler service.

Schedules and schedule events travel as JSON documents. Field names on the
wire follow the scheduler service (camelCase where it differs from the
Python attribute); every field has a zero-value default so a sparse document
still decodes.
"""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from scheduler_client.errors import DecodeError, EncodeError


class _SchedulerModel(BaseModel):
    """Shared config: immutable, alias-aware, tolerant of unknown fields."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    created: int = Field(0, description="Creation time (ms since epoch)")
    modified: int = Field(0, description="Last modification time (ms since epoch)")
    origin: int = Field(0, description="Origin timestamp (ms since epoch)")


class Schedule(_SchedulerModel):
    """A time-based trigger definition.

    Attributes:
        id: Server-assigned identifier.
        name: Unique human-readable name.
        start: Start time in scheduler format (YYYYMMDDTHHMMSS).
        end: End time in scheduler format.
        frequency: ISO-8601 period between runs (e.g., PT1H).
        cron: Cron expression, used instead of frequency when set.
        run_once: Fire a single time at start.
    """

    id: str = ""
    name: str = ""
    start: str = ""
    end: str = ""
    frequency: str = ""
    cron: str = ""
    run_once: bool = Field(False, alias="runOnce")


class Addressable(_SchedulerModel):
    """Endpoint a schedule event is delivered to."""

    id: str = ""
    name: str = ""
    protocol: str = ""
    http_method: str = Field("", alias="method")
    address: str = ""
    port: int = 0
    path: str = ""
    publisher: str = ""
    user: str = ""
    password: str = ""
    topic: str = ""


class ScheduleEvent(_SchedulerModel):
    """An action bound to a schedule.

    Attributes:
        id: Server-assigned identifier.
        name: Unique human-readable name.
        schedule: Name of the schedule that triggers this event.
        addressable: Where the event is sent when triggered.
        parameters: Opaque payload passed to the target.
        service: Name of the service that owns the event.
    """

    id: str = ""
    name: str = ""
    schedule: str = ""
    addressable: Addressable = Field(default_factory=Addressable)
    parameters: str = ""
    service: str = ""


EntityT = TypeVar("EntityT", bound=BaseModel)


def encode_entity(entity: BaseModel) -> bytes:
    """Serialize an entity to its JSON wire form.

    Args:
        entity: Schedule, ScheduleEvent or any other model instance.

    Returns:
        UTF-8 encoded JSON using wire field names.

    Raises:
        EncodeError: If the entity cannot be serialized.
    """
    try:
        return entity.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodeError(
            f"failed to encode {type(entity).__name__}: {e}"
        ) from e


def decode_entity(model_cls: type[EntityT], body: bytes, url: str | None = None) -> EntityT:
    """Decode a JSON response body into an entity.

    Args:
        model_cls: Target model class.
        body: Raw response bytes, left untouched.
        url: URL the body came from, attached to errors.

    Returns:
        Decoded model instance.

    Raises:
        DecodeError: If the body is not valid JSON for the target model.
    """
    try:
        return model_cls.model_validate_json(body)
    except (ValidationError, ValueError) as e:
        raise DecodeError(
            f"failed to decode {model_cls.__name__}: {e}", url=url, body=body
        ) from e
