"""
Core server bootstrap for the dev server URL MCP server.

Wires up the fastmcp instance and registers the URL resolution tools.
"""

import logging

from fastmcp import FastMCP  # type: ignore[import-not-found]

from devurl.resolver import UrlResolver
from devurl.settings import Settings
from devurl.tools import UrlToolDependencies, register_url_tools


class ServerApp:
    """Server container wiring a URL resolver into the MCP tools."""

    def __init__(self, settings: Settings, resolver: UrlResolver | None = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._resolver = resolver
        self._tool_dependencies = UrlToolDependencies()
        self._mcp_app = FastMCP(
            name="Dev Server URL MCP Server",
            instructions=(
                "Resolve the addresses and deep links clients use to reach a local development server."
            ),
        )
        register_url_tools(self._mcp_app, self._tool_dependencies)

    def startup(self) -> None:
        """Prepare resources required to launch the SSE server."""
        self._logger.info(
            "Starting server bootstrap",
            extra={"dev_server_port": self._settings.dev_server_port},
        )
        self._tool_dependencies.attach_resolver(
            self._resolver or UrlResolver.from_settings(self._settings)
        )

    def shutdown(self) -> None:
        """Release acquired resources."""
        self._logger.info("Shutting down server bootstrap")
        self._tool_dependencies.detach_resolver()

    def serve_forever(self) -> None:
        """Run the FastMCP SSE server until interrupted."""
        host = "0.0.0.0"
        port = self._settings.mcp_sse_port
        self._logger.info("Starting SSE transport", extra={"host": host, "port": port})
        self._mcp_app.run(transport="sse", host=host, port=port)

    async def serve_sse_async(self, host: str = "0.0.0.0") -> None:
        """Async helper for running the SSE transport (used by smoke tests)."""
        await self._mcp_app.run_http_async(
            transport="sse",
            host=host,
            port=self._settings.mcp_sse_port,
        )

    @property
    def mcp(self) -> FastMCP:
        """Expose the configured FastMCP instance."""
        return self._mcp_app


def build_server(settings: Settings, resolver: UrlResolver | None = None) -> ServerApp:
    """Factory used by main.py to create the configured server instance."""
    return ServerApp(settings, resolver)
