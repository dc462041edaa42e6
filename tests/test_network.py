"""
Unit tests for instrumentation.network
"""
from unittest.mock import MagicMock

import pytest

from instrumentation.network import NetworkInfo, StaticConnectivityService, connection_type


class TestConnectionType:
    """Formatting of the active network"""

    @pytest.mark.parametrize(
        ("type_name", "subtype_name", "expected"),
        [
            ("WIFI", "", "WIFI;"),
            ("", "LTE", "LTE"),
            ("WIFI", "5G", "WIFI;5G"),
            ("MOBILE", None, "MOBILE;"),
            (None, "HSPA", "HSPA"),
            (None, None, ""),
            ("", "", ""),
        ],
    )
    def test_format(self, type_name, subtype_name, expected):
        connectivity = StaticConnectivityService(NetworkInfo(type_name, subtype_name))
        assert connection_type(connectivity) == expected

    def test_no_active_network(self):
        assert connection_type(StaticConnectivityService(None)) == ""

    def test_no_connectivity_service(self):
        assert connection_type(None) == ""

    def test_service_error_degrades_to_empty(self, caplog):
        connectivity = MagicMock()
        connectivity.active_network_info.side_effect = RuntimeError("service unavailable")
        with caplog.at_level("WARNING", logger="instrumentation.network"):
            assert connection_type(connectivity) == ""
        assert "service unavailable" in caplog.text
