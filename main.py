"""Run the MCP server that resolves dev server addresses, deep links and bundle URLs."""

import logging
import os

from devurl.server import build_server
from devurl.settings import Settings


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main() -> None:
    """Load settings, attach the URL resolver and serve the tools over SSE."""
    _configure_logging()
    logger = logging.getLogger("devurl-mcp-server")
    settings = Settings.load()
    server = build_server(settings)

    try:
        server.startup()
        logger.info(
            "URL tools available at http://localhost:%s/sse, resolving dev server port %s",
            settings.mcp_sse_port,
            settings.dev_server_port,
        )
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutdown requested (Ctrl+C).")
    except Exception:
        logger.exception("Server stopped due to an unexpected error.")
        raise
    finally:
        server.shutdown()
        logger.info("Server shutdown complete.")


if __name__ == "__main__":
    main()
