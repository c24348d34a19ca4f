"""MCP tool registrations for the dev server URL engine."""

import logging
from dataclasses import dataclass
from typing import Annotated, Awaitable, Callable

from fastmcp import FastMCP
from pydantic import Field

from devurl.errors import UrlResolutionError
from devurl.models import BundleOptions, UrlOptions
from devurl.resolver import UrlResolver
from devurl.settings import read_proxy_overrides

logger = logging.getLogger(__name__)

ProjectRoot = Annotated[str, Field(description="Absolute path to the project root containing package.json.")]
Hostname = Annotated[
    str | None,
    Field(description="Hostname clients should use. 'localhost' resolves to 127.0.0.1; omit to use the LAN address."),
]


@dataclass
class UrlToolDependencies:
    """Runtime dependencies required by the MCP tools."""

    resolver: UrlResolver | None = None

    def attach_resolver(self, resolver: UrlResolver) -> None:
        self.resolver = resolver

    def detach_resolver(self) -> None:
        self.resolver = None

    def require_resolver(self) -> UrlResolver:
        if self.resolver is None:
            raise RuntimeError("URL resolver is not initialized.")
        return self.resolver


def _log_tool_event(tool_name: str, event: str, **fields: object) -> None:
    logger.info(
        "url_tool_event",
        extra={"tool": tool_name, "event": event, **fields},
    )


def _validate_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string.")
    return value.strip()


async def with_error_handling(
    tool_name: str,
    action: Callable[[], Awaitable[str]],
) -> dict[str, str]:
    """Run ``action`` and shape its result (or failure) as a tool payload."""
    try:
        url = await action()
    except (UrlResolutionError, ValueError) as exc:
        logger.warning("%s failed to resolve", tool_name, exc_info=True)
        _log_tool_event(tool_name, "resolution_error", error=str(exc))
        return {"error": str(exc)}
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s failed unexpectedly", tool_name)
        _log_tool_event(tool_name, "unexpected_error", error=str(exc))
        return {"error": f"Unexpected error: {exc}"}
    _log_tool_event(tool_name, "success", url=url)
    return {"url": url}


def register_url_tools(mcp: FastMCP, dependencies: UrlToolDependencies) -> None:
    """Register MCP tools that resolve dev server URLs."""

    @mcp.tool(
        name="construct_url",
        description="Builds the URL clients use to reach the dev server, honouring the project's scheme and any proxy override for the request intent.",
    )
    async def construct_url(
        project_root: ProjectRoot,
        url_type: Annotated[str | None, Field(description="One of 'http', 'no-protocol', 'redirect'; omit for a scheme deep link.")] = None,
        host_type: Annotated[str | None, Field(description="One of 'lan', 'localhost'.")] = None,
        lan_type: Annotated[str | None, Field(description="One of 'ip', 'hostname'.")] = None,
        is_packager_request: Annotated[bool, Field(description="True when the URL is for bundler requests rather than the manifest.")] = False,
        hostname: Hostname = None,
    ) -> dict[str, str]:
        """Resolve a manifest or packager URL."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            options = UrlOptions.from_mapping(
                {"url_type": url_type, "host_type": host_type, "lan_type": lan_type}
            )
            return await dependencies.require_resolver().construct_url_async(
                root,
                options,
                is_packager_request,
                hostname,
                proxy_overrides=read_proxy_overrides(),
            )

        return await with_error_handling("construct_url", _call)

    @mcp.tool(
        name="construct_manifest_url",
        description="Builds the manifest URL for the project using the default scheme deep link format.",
    )
    async def construct_manifest_url(
        project_root: ProjectRoot,
        hostname: Hostname = None,
    ) -> dict[str, str]:
        """Resolve the manifest URL."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            return await dependencies.require_resolver().construct_manifest_url_async(
                root, None, hostname, proxy_overrides=read_proxy_overrides()
            )

        return await with_error_handling("construct_manifest_url", _call)

    @mcp.tool(
        name="construct_log_url",
        description="Builds the URL serving the dev server's log stream. Proxy overrides are never applied.",
    )
    async def construct_log_url(
        project_root: ProjectRoot,
        hostname: Hostname = None,
    ) -> dict[str, str]:
        """Resolve the log URL."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            return await dependencies.require_resolver().construct_log_url_async(root, hostname)

        return await with_error_handling("construct_log_url", _call)

    @mcp.tool(
        name="construct_dev_client_url",
        description="Builds the deep link that opens a development client build on this dev server. Fails when no scheme is configured.",
    )
    async def construct_dev_client_url(
        project_root: ProjectRoot,
        scheme: Annotated[str | None, Field(description="Scheme to use instead of the one recorded for the project.")] = None,
    ) -> dict[str, str]:
        """Resolve the development client deep link."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            return await dependencies.require_resolver().construct_dev_client_url_async(
                root, scheme, proxy_overrides=read_proxy_overrides()
            )

        return await with_error_handling("construct_dev_client_url", _call)

    @mcp.tool(
        name="construct_source_map_url",
        description="Builds the loopback URL for a bundle's source map. The minified bundle is always requested.",
    )
    async def construct_source_map_url(
        project_root: ProjectRoot,
        bundle_path: Annotated[str, Field(description="Bundle path relative to the server root, e.g. './App.tsx'.")],
        dev: bool = False,
        strict: bool = False,
    ) -> dict[str, str]:
        """Resolve a source map URL."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            path = _validate_non_empty(bundle_path, "bundle_path")
            return await dependencies.require_resolver().construct_source_map_url_async(
                root,
                path,
                bundle_options=BundleOptions(dev=dev, strict=strict),
            )

        return await with_error_handling("construct_source_map_url", _call)

    @mcp.tool(
        name="construct_bundle_url",
        description="Builds the http URL the bundler serves an entry point's bundle from, including the bundle query.",
    )
    async def construct_bundle_url(
        project_root: ProjectRoot,
        entry_point: Annotated[str, Field(description="Entry point module, e.g. 'index.js'.")],
        dev: bool = False,
        minify: bool = False,
        strict: bool = False,
        hostname: Hostname = None,
    ) -> dict[str, str]:
        """Resolve a bundle URL."""

        async def _call() -> str:
            root = _validate_non_empty(project_root, "project_root")
            entry = _validate_non_empty(entry_point, "entry_point")
            return await dependencies.require_resolver().construct_bundle_url_async(
                root,
                entry,
                BundleOptions(dev=dev, minify=minify, strict=strict),
                hostname,
                proxy_overrides=read_proxy_overrides(),
            )

        return await with_error_handling("construct_bundle_url", _call)

    logger.info("Dev server URL tools registered.")
