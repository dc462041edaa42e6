import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkInfo:
    """Type and subtype names of the active network, as the host reports them."""
    type_name: str | None = None
    subtype_name: str | None = None


class ConnectivityService(Protocol):
    def active_network_info(self) -> NetworkInfo | None:
        """Returns the active network, or None when there is no connection."""
        ...


class StaticConnectivityService:
    """Connectivity service that always reports the same network."""

    def __init__(self, network_info: NetworkInfo | None = None):
        self.network_info = network_info

    def active_network_info(self) -> NetworkInfo | None:
        return self.network_info


def connection_type(connectivity: ConnectivityService | None) -> str:
    """
    Formats the active network as "<type>;<subtype>".

    Missing parts are dropped: a type without subtype gives "<type>;", a
    subtype without type gives "<subtype>", and no connectivity service or no
    active network gives "". Errors from the service are logged and yield "".

    Args:
        connectivity: The host's connectivity service, if one is available.

    Returns:
        The connection type string, never None.
    """
    if connectivity is None:
        return ""
    try:
        network_info = connectivity.active_network_info()
    except Exception as e:
        logger.warning(f"Could not read active network info: {e}")
        return ""
    if network_info is None:
        return ""

    parts: list[str] = []
    if network_info.type_name:
        parts.append(f"{network_info.type_name};")
    if network_info.subtype_name:
        parts.append(network_info.subtype_name)
    return "".join(parts)
