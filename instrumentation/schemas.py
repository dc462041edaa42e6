from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchemaType(str, Enum):
    LIGHTNING_INTERACTION = "LightningInteraction"
    LIGHTNING_PERFORMANCE = "LightningPerformance"
    LIGHTNING_PAGE_VIEW = "LightningPageView"
    LIGHTNING_ERROR = "LightningError"


class EventType(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ERROR = "error"
    CRUD = "crud"


class ErrorType(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class DeviceAppAttributes(BaseModel):
    """Snapshot of the device and host application an event was recorded on."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    app_version: str = ""
    app_name: str = ""
    os_version: str = ""
    os_name: str = ""
    native_app_type: str = ""
    mobile_sdk_version: str = ""
    device_model: str = ""
    device_id: str = ""
    client_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class InstrumentationEvent(BaseModel):
    """
    Immutable analytics event.

    Instances are produced by InstrumentationEventBuilder, which guarantees the
    mandatory fields (schema_type, name, device_app_attributes) are present and
    assigns sequence_id from the shared counter.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    event_id: str
    start_time: int
    end_time: int = 0
    name: str
    attributes: dict[str, Any] | None = None
    session_id: int = 0
    sequence_id: int
    sender_id: str | None = None
    sender_context: dict[str, Any] | None = None
    schema_type: SchemaType
    event_type: EventType | None = None
    error_type: ErrorType | None = None
    device_app_attributes: DeviceAppAttributes
    connection_type: str = ""

    def to_json(self) -> dict[str, Any]:
        """
        Returns the event as a JSON-compatible dict keyed by camelCase names.

        Enum fields are emitted by value and unset optional fields are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
