"""
Public URL construction operations.

:class:`UrlResolver` ties the collaborators (config store, network discovery)
to the pure resolution pieces. Every operation loads a fresh config snapshot and
takes proxy overrides as an explicit argument; nothing is kept between calls.
"""

import logging
from pathlib import Path

from devurl.address import AddressResolver
from devurl.composer import compose_url, encode_uri_component
from devurl.config_store import ConfigStore, FileConfigStore
from devurl.errors import NoSchemeError
from devurl.models import (
    BundleOptions,
    HostType,
    ProjectConfig,
    ProxyOverrides,
    UrlOptions,
    UrlType,
)
from devurl.network import NetworkDiscovery, SocketNetworkDiscovery
from devurl.query import build_bundle_query
from devurl.scheme import resolve_dev_client_scheme, resolve_scheme
from devurl.settings import Settings

logger = logging.getLogger(__name__)

DEV_CLIENT_HOST = "expo-development-client"


def strip_js_extension(entry_point: str) -> str:
    """Drop a trailing ``.js`` so the bundler receives the module path."""
    if entry_point.endswith(".js"):
        return entry_point[: -len(".js")]
    return entry_point


class UrlResolver:
    """Entry point for every dev server URL the engine can produce."""

    def __init__(
        self,
        *,
        dev_server_port: int,
        config_store: ConfigStore | None = None,
        network: NetworkDiscovery | None = None,
    ) -> None:
        self._config_store = config_store or FileConfigStore()
        self._addresses = AddressResolver(network or SocketNetworkDiscovery(), dev_server_port)

    @classmethod
    def from_settings(cls, settings: Settings) -> "UrlResolver":
        """Factory that builds the resolver from Settings."""
        return cls(dev_server_port=settings.dev_server_port)

    async def _load_config(self, project_root: str | Path) -> ProjectConfig:
        return await self._config_store.load_project_config(project_root)

    def construct_bundle_query_params_with_config(
        self,
        project_root: str | Path,
        options: BundleOptions | None,
        config: ProjectConfig,
    ) -> str:
        logger.debug(
            "Building bundle query",
            extra={"project_root": str(project_root), "sdk_version": config.sdk_version},
        )
        return build_bundle_query(options)

    async def construct_url_async(
        self,
        project_root: str | Path,
        options: UrlOptions | None,
        is_packager_request: bool,
        hostname: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        options = options or UrlOptions()
        config = await self._load_config(project_root)

        hostname_hint = hostname
        if not hostname_hint and options.host_type is HostType.LOCALHOST:
            hostname_hint = "localhost"

        address = self._addresses.resolve(
            hostname_hint,
            proxy_overrides,
            is_packager_request,
            lan_type=options.lan_type,
        )
        url = compose_url(resolve_scheme(config), address, options.url_type)
        logger.debug(
            "Constructed url",
            extra={"project_root": str(project_root), "packager": is_packager_request, "url": url},
        )
        return url

    async def construct_manifest_url_async(
        self,
        project_root: str | Path,
        options: UrlOptions | None = None,
        hostname: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        return await self.construct_url_async(
            project_root, options, False, hostname, proxy_overrides=proxy_overrides
        )

    async def construct_host_uri_async(
        self,
        project_root: str | Path,
        hostname: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        return await self.construct_url_async(
            project_root,
            UrlOptions(url_type=UrlType.NO_PROTOCOL),
            False,
            hostname,
            proxy_overrides=proxy_overrides,
        )

    async def construct_debugger_host_async(
        self,
        project_root: str | Path,
        hostname: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        return await self.construct_url_async(
            project_root,
            UrlOptions(url_type=UrlType.NO_PROTOCOL),
            True,
            hostname,
            proxy_overrides=proxy_overrides,
        )

    async def construct_bundle_url_async(
        self,
        project_root: str | Path,
        entry_point: str,
        bundle_options: BundleOptions | None = None,
        hostname: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        config = await self._load_config(project_root)
        address = self._addresses.resolve(hostname, proxy_overrides, True)
        query = self.construct_bundle_query_params_with_config(project_root, bundle_options, config)
        return compose_url(
            None,
            address,
            UrlType.HTTP,
            path=f"{strip_js_extension(entry_point)}.bundle",
            query=query,
        )

    async def construct_log_url_async(
        self,
        project_root: str | Path,
        hostname: str | None = None,
    ) -> str:
        await self._load_config(project_root)
        # Logs are always fetched from the server directly, never through a proxy.
        address = self._addresses.resolve(hostname, None, False)
        return compose_url(None, address, UrlType.HTTP, path="logs")

    async def construct_dev_client_url_async(
        self,
        project_root: str | Path,
        scheme: str | None = None,
        *,
        proxy_overrides: ProxyOverrides | None = None,
    ) -> str:
        """
        Build the deep link that opens a development client on this server.

        Raises:
            NoSchemeError: when neither the caller nor the project supplies a scheme.
        """
        config = await self._load_config(project_root)
        resolved_scheme = scheme or resolve_dev_client_scheme(config)
        if not resolved_scheme:
            logger.warning(
                "Development client url requested without a scheme",
                extra={"project_root": str(project_root)},
            )
            raise NoSchemeError()

        address = self._addresses.resolve(None, proxy_overrides, False)
        inner_url = compose_url(None, address, UrlType.HTTP)
        return f"{resolved_scheme}://{DEV_CLIENT_HOST}/?url={encode_uri_component(inner_url)}"

    async def construct_source_map_url_async(
        self,
        project_root: str | Path,
        bundle_path: str,
        hostname: str | None = None,
        *,
        bundle_options: BundleOptions | None = None,
    ) -> str:
        # Source maps are fetched by tooling on this machine, so the caller's
        # hostname is ignored and the address is always loopback.
        config = await self._load_config(project_root)
        if hostname and hostname != "localhost":
            logger.debug("Ignoring hostname for source map url", extra={"hostname": hostname})
        address = self._addresses.resolve("localhost", None, True)

        requested = bundle_options or BundleOptions()
        query = self.construct_bundle_query_params_with_config(
            project_root,
            BundleOptions(
                dev=requested.dev,
                minify=True,
                hot=requested.hot,
                strict=requested.strict,
            ),
            config,
        )
        return compose_url(None, address, UrlType.HTTP, path=f"{bundle_path}.map", query=query)
