# Storyblok MCP Server
# File: __init__.py
# Version: v1

"""Top-level package for the Storyblok MCP Server."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]


def _resolve_version() -> str:
    """Resolve installed distribution version.

    Uses package metadata so __version__ stays aligned with pyproject.toml.
    Falls back to a fixed default when running from a source checkout.
    """
    try:
        return version("storyblok-mcp-server")
    except PackageNotFoundError:
        return "1.0.0"


__version__ = _resolve_version()
