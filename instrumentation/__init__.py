from instrumentation.builder import EventBuilderException, InstrumentationEventBuilder
from instrumentation.manager import AnalyticsManager
from instrumentation.network import (
    ConnectivityService,
    NetworkInfo,
    StaticConnectivityService,
    connection_type,
)
from instrumentation.schemas import (
    DeviceAppAttributes,
    ErrorType,
    EventType,
    InstrumentationEvent,
    SchemaType,
)

__all__ = [
    "AnalyticsManager",
    "ConnectivityService",
    "DeviceAppAttributes",
    "ErrorType",
    "EventBuilderException",
    "EventType",
    "InstrumentationEvent",
    "InstrumentationEventBuilder",
    "NetworkInfo",
    "SchemaType",
    "StaticConnectivityService",
    "connection_type",
]
