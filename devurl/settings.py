"""Environment-driven configuration utilities for the dev server URL engine."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from devurl.models import ProxyOverrides

PACKAGER_PROXY_ENV = "EXPO_PACKAGER_PROXY_URL"
MANIFEST_PROXY_ENV = "EXPO_MANIFEST_PROXY_URL"


def _read_port(name: str, default: str) -> int:
    raw = os.getenv(name, "").strip() or default
    try:
        port = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc
    if not 0 < port < 65536:
        raise ValueError(f"{name} must be between 1 and 65535.")
    return port


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    dev_server_port: int = 19000
    mcp_sse_port: int = 8000

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()
        return cls(
            dev_server_port=_read_port("EXPO_DEV_SERVER_PORT", "19000"),
            mcp_sse_port=_read_port("MCP_SSE_PORT", "8000"),
        )


def read_proxy_overrides() -> ProxyOverrides:
    """Snapshot both proxy override variables in a single read."""
    environ = dict(os.environ)
    return ProxyOverrides(
        packager_proxy_url=(environ.get(PACKAGER_PROXY_ENV) or "").strip() or None,
        manifest_proxy_url=(environ.get(MANIFEST_PROXY_ENV) or "").strip() or None,
    )
