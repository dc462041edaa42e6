"""
Shared pytest fixtures for instrumentation tests.
"""
import pytest

from instrumentation.manager import AnalyticsManager
from instrumentation.network import NetworkInfo, StaticConnectivityService
from instrumentation.schemas import DeviceAppAttributes


@pytest.fixture
def device_app_attributes():
    return DeviceAppAttributes(
        app_version="1.0",
        app_name="TestApp",
        os_version="14",
        os_name="android",
        native_app_type="Native",
        mobile_sdk_version="5.0.0",
        device_model="Pixel",
        device_id="device-1",
        client_id="client-1",
    )


@pytest.fixture
def analytics_manager(device_app_attributes):
    return AnalyticsManager(device_app_attributes=device_app_attributes)


@pytest.fixture
def wifi_connectivity():
    return StaticConnectivityService(NetworkInfo(type_name="WIFI", subtype_name=""))
