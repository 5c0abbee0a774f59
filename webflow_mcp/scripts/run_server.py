"""Run the Webflow MCP server.

Usage::

    WEBFLOW_API_TOKEN=... python -m webflow_mcp.scripts.run_server

The token may also come from a ``.env`` file at the repository root or in
the current directory. Set ``MCP_TRANSPORT=http`` to serve over HTTP instead
of stdio.
"""

from __future__ import annotations

import sys

from webflow_mcp.core.config import (
    env_file_candidates,
    load_settings,
    resolved_env_file,
)
from webflow_mcp.core.exceptions import StartupError
from webflow_mcp.core.logging_config import configure_logging, get_logger


def main() -> None:
    configure_logging()
    logger = get_logger(__name__)

    try:
        settings = load_settings()
    except StartupError as exc:
        logger.error(
            "startup_failed",
            error=str(exc),
            env_file=resolved_env_file() or "not-found",
            env_candidates=list(env_file_candidates()),
        )
        sys.exit(1)

    from webflow_mcp.mcp.server import create_server, run_server

    logger.info(
        "server_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        webflow_base=str(settings.webflow_api_base),
        transport=settings.mcp_transport,
    )
    server = create_server(settings)
    run_server(server, settings)
    logger.info("server_shutdown")


if __name__ == "__main__":
    main()
