import logging
import time
import uuid
from typing import Any

from instrumentation.manager import AnalyticsManager
from instrumentation.network import ConnectivityService, connection_type
from instrumentation.schemas import (
    ErrorType,
    EventType,
    InstrumentationEvent,
    SchemaType,
)

logger = logging.getLogger(__name__)


class EventBuilderException(Exception):
    """Raised when an event can not be built because a mandatory field is missing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InstrumentationEventBuilder:
    """
    Collects event fields through chained setters and builds an InstrumentationEvent.

    Setters never validate; build_event() checks the mandatory fields, draws the
    next sequence id from the analytics manager and reads the connection type
    from the connectivity service at that moment.
    """

    def __init__(
        self,
        analytics_manager: AnalyticsManager,
        connectivity: ConnectivityService | None = None,
    ):
        self.analytics_manager = analytics_manager
        self.connectivity = connectivity
        self._start_time: int = 0
        self._end_time: int = 0
        self._name: str | None = None
        self._attributes: dict[str, Any] | None = None
        self._session_id: int = 0
        self._sender_id: str | None = None
        self._sender_context: dict[str, Any] | None = None
        self._schema_type: SchemaType | None = None
        self._event_type: EventType | None = None
        self._error_type: ErrorType | None = None

    @classmethod
    def get_instance(
        cls,
        analytics_manager: AnalyticsManager,
        connectivity: ConnectivityService | None = None,
    ) -> "InstrumentationEventBuilder":
        return cls(analytics_manager, connectivity)

    def start_time(self, start_time: int) -> "InstrumentationEventBuilder":
        self._start_time = start_time
        return self

    def end_time(self, end_time: int) -> "InstrumentationEventBuilder":
        self._end_time = end_time
        return self

    def name(self, name: str | None) -> "InstrumentationEventBuilder":
        self._name = name
        return self

    def attributes(self, attributes: dict[str, Any] | None) -> "InstrumentationEventBuilder":
        self._attributes = attributes
        return self

    def session_id(self, session_id: int) -> "InstrumentationEventBuilder":
        self._session_id = session_id
        return self

    def sender_id(self, sender_id: str | None) -> "InstrumentationEventBuilder":
        self._sender_id = sender_id
        return self

    def sender_context(self, sender_context: dict[str, Any] | None) -> "InstrumentationEventBuilder":
        self._sender_context = sender_context
        return self

    def schema_type(self, schema_type: SchemaType | None) -> "InstrumentationEventBuilder":
        self._schema_type = schema_type
        return self

    def event_type(self, event_type: EventType | None) -> "InstrumentationEventBuilder":
        self._event_type = event_type
        return self

    def error_type(self, error_type: ErrorType | None) -> "InstrumentationEventBuilder":
        self._error_type = error_type
        return self

    def build_event(self) -> InstrumentationEvent:
        """
        Validates the collected fields and builds the event.

        When several mandatory fields are missing, the message of the last
        failing check is the one raised.

        Returns:
            The built event.

        Raises:
            EventBuilderException: If schema type, name or device app
                attributes are missing. The sequence counter is not advanced.
        """
        event_id = str(uuid.uuid4())
        error_message: str | None = None
        if self._schema_type is None:
            error_message = "Mandatory field 'schema type' not set!"
        if not self._name:
            error_message = "Mandatory field 'name' not set!"
        device_app_attributes = self.analytics_manager.get_device_app_attributes()
        if device_app_attributes is None:
            error_message = "Mandatory field 'device app attributes' not set!"
        if error_message is not None:
            logger.warning(f"Failed to build event '{self._name}': {error_message}")
            raise EventBuilderException(error_message)

        sequence_id = self.analytics_manager.next_global_sequence_id()

        # Defaults to current time if not explicitly set; an explicit 0 is treated as unset.
        if self._start_time == 0:
            self._start_time = int(time.time() * 1000)

        event = InstrumentationEvent(
            event_id=event_id,
            start_time=self._start_time,
            end_time=self._end_time,
            name=self._name,
            attributes=self._attributes,
            session_id=self._session_id,
            sequence_id=sequence_id,
            sender_id=self._sender_id,
            sender_context=self._sender_context,
            schema_type=self._schema_type,
            event_type=self._event_type,
            error_type=self._error_type,
            device_app_attributes=device_app_attributes,
            connection_type=connection_type(self.connectivity),
        )
        logger.debug(f"Built event {event.event_id} '{event.name}' (sequence id {sequence_id})")
        return event
