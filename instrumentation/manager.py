import logging
import threading
from dataclasses import dataclass, field

from instrumentation.config import Settings
from instrumentation.schemas import DeviceAppAttributes

logger = logging.getLogger(__name__)


@dataclass
class AnalyticsManager:
    """
    Owns the device/app snapshot and the global event sequence counter.

    Every builder sharing one manager draws sequence ids from the same counter.
    Increments go through next_global_sequence_id(), which holds the lock for
    the whole read-modify-write so concurrent builds never observe the same
    value.
    """

    device_app_attributes: DeviceAppAttributes | None = None
    global_sequence_id: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def from_settings(cls, config: Settings) -> "AnalyticsManager":
        if not config.DEVICE_ATTRIBUTES_ENABLED:
            logger.info("Device attributes disabled by configuration. Events will fail validation.")
            return cls()
        attributes = DeviceAppAttributes(
            app_version=config.APP_VERSION,
            app_name=config.APP_NAME,
            os_version=config.OS_VERSION,
            os_name=config.OS_NAME,
            native_app_type=config.NATIVE_APP_TYPE,
            mobile_sdk_version=config.MOBILE_SDK_VERSION,
            device_model=config.DEVICE_MODEL,
            device_id=config.DEVICE_ID,
            client_id=config.CLIENT_ID,
        )
        logger.info(f"Analytics manager initialized for app '{config.APP_NAME}'")
        return cls(device_app_attributes=attributes)

    def get_device_app_attributes(self) -> DeviceAppAttributes | None:
        return self.device_app_attributes

    def get_global_sequence_id(self) -> int:
        with self._lock:
            return self.global_sequence_id

    def set_global_sequence_id(self, sequence_id: int) -> None:
        with self._lock:
            self.global_sequence_id = sequence_id
        logger.debug(f"Global sequence id set to {sequence_id}")

    def next_global_sequence_id(self) -> int:
        """Increments the shared counter and returns the new value."""
        with self._lock:
            self.global_sequence_id += 1
            sequence_id = self.global_sequence_id
        logger.debug(f"Global sequence id advanced to {sequence_id}")
        return sequence_id
