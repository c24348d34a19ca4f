"""Network discovery for the machine running the dev server."""

import logging
import socket
from typing import Protocol

logger = logging.getLogger(__name__)

LOOPBACK_ADDRESS = "127.0.0.1"


class NetworkDiscovery(Protocol):
    def discover_lan_address(self) -> str: ...

    def discover_hostname(self) -> str: ...


class SocketNetworkDiscovery:
    """Discover the LAN address by asking the OS which interface routes outward."""

    def __init__(self, probe_host: str = "8.8.8.8", probe_port: int = 80) -> None:
        self._probe = (probe_host, probe_port)

    def discover_lan_address(self) -> str:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                # connect() on UDP sends nothing; it only selects the interface.
                sock.connect(self._probe)
                address = sock.getsockname()[0]
        except OSError:
            logger.warning("LAN address discovery failed, using loopback", exc_info=True)
            return LOOPBACK_ADDRESS
        logger.debug("Discovered LAN address", extra={"address": address})
        return address

    def discover_hostname(self) -> str:
        return socket.gethostname()
