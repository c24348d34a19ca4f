"""Resolution of the host, port and protocol a client should connect to."""

import logging
from urllib.parse import urlsplit

import httpx

from devurl.errors import InvalidProxyUrlError
from devurl.models import LanType, ProxyOverrides, ResolvedAddress
from devurl.network import LOOPBACK_ADDRESS, NetworkDiscovery

logger = logging.getLogger(__name__)

HTTPS_DEFAULT_PORT = 443


class AddressResolver:
    """Resolve a :class:`ResolvedAddress` for one request.

    A proxy override for the caller's intent wins over everything else. Without
    one, an explicit hostname hint is used, and only when neither supplies a host
    is the network collaborator consulted.
    """

    def __init__(self, network: NetworkDiscovery, default_port: int) -> None:
        self._network = network
        self._default_port = default_port

    def resolve(
        self,
        hostname_hint: str | None,
        proxy_overrides: ProxyOverrides | None,
        is_packager_request: bool,
        lan_type: LanType | None = None,
    ) -> ResolvedAddress:
        proxy_url = (proxy_overrides or ProxyOverrides()).select(is_packager_request)
        if proxy_url:
            address = self._from_proxy(proxy_url)
            logger.debug(
                "Using proxy override",
                extra={
                    "packager": is_packager_request,
                    "host": address.host,
                    "port": address.port,
                },
            )
            return address

        return ResolvedAddress(
            host=self._resolve_host(hostname_hint, lan_type),
            port=self._default_port,
            protocol="http",
        )

    def _resolve_host(self, hostname_hint: str | None, lan_type: LanType | None) -> str:
        if hostname_hint == "localhost":
            return LOOPBACK_ADDRESS
        if hostname_hint:
            return hostname_hint
        if lan_type is LanType.HOSTNAME:
            return self._network.discover_hostname()
        return self._network.discover_lan_address()

    def _from_proxy(self, raw_url: str) -> ResolvedAddress:
        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as exc:
            raise InvalidProxyUrlError(f"Invalid proxy URL {raw_url!r}: {exc!s}") from exc

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidProxyUrlError(
                f"Invalid proxy URL {raw_url!r}: expected an http(s) URL with a host."
            )

        # httpx drops default ports, so an explicit ":80" is read from the raw text.
        try:
            port = urlsplit(raw_url.strip()).port
        except ValueError as exc:
            raise InvalidProxyUrlError(f"Invalid proxy URL {raw_url!r}: {exc!s}") from exc
        if port is None:
            port = HTTPS_DEFAULT_PORT if url.scheme == "https" else self._default_port
        protocol = "https" if url.scheme == "https" else "http"
        return ResolvedAddress(host=url.host, port=port, protocol=protocol)
