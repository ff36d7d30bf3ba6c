# Storyblok MCP Server
# File: transports/stdio_server.py
# Version: v1

"""STDIO entrypoint for the Storyblok MCP server.

This is the script behind the ``storyblok-mcp`` console command.

It:

- loads configuration from the environment,
- sends logs to stderr (stdout carries the MCP protocol),
- creates a FastMCP server and the session holding the active space/region,
- registers all Storyblok tools, and
- runs the built-in stdio transport.
"""

from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from ..config import StoryblokConfig
from ..session import StoryblokSession
from ..tools import tasks

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_server(config: StoryblokConfig) -> FastMCP:
    """Create the FastMCP server with every Storyblok tool registered."""
    mcp = FastMCP("storyblok-mcp")
    session = StoryblokSession.from_config(config)
    tasks.register_tools(mcp, session, config)
    return mcp


def main() -> None:
    """Synchronous entrypoint for console_scripts."""
    config = StoryblokConfig.from_env()
    _configure_logging(config.log_level)

    if not config.token_configured:
        logger.warning("STORYBLOK_MANAGEMENT_TOKEN is not set; API tools will fail.")

    try:
        mcp = build_server(config)
        logger.info("MCP server is running")
        # Let FastMCP handle stdio + event loop setup.
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception:
        logger.exception("Error starting server")
        sys.exit(1)


if __name__ == "__main__":
    main()
