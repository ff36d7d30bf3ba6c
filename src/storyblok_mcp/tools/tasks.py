# Storyblok MCP Server
# File: tools/tasks.py
# Version: v1
#
# NOTE: This module is the single place where we define "business logic"
# that is exposed as MCP tools.  The stdio transport simply calls
# `register_tools(server, session, config)` to wire these up.

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Awaitable, Callable, Dict, List, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import StoryblokClient
from ..config import StoryblokConfig
from ..errors import StoryblokError
from ..models import AssetSummary, SeoInfo, ToolResult
from ..regions import Region
from ..session import RequestContext, StoryblokSession

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers (client factory, JSON rendering, error mapping)
# ---------------------------------------------------------------------------


_CONFIG: StoryblokConfig | None = None


def _get_config() -> StoryblokConfig:
    """Return the configuration bound by register_tools (env as a fallback)."""
    return _CONFIG if _CONFIG is not None else StoryblokConfig.from_env()


def _make_client(cfg: Optional[StoryblokConfig] = None) -> StoryblokClient:
    """Create a StoryblokClient from the server configuration.

    Callers should invoke this with *no arguments* so unit tests can swap it
    for a no-arg lambda returning a fake client.
    """
    cfg = cfg or _get_config()
    return StoryblokClient(config=cfg)


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _compact(data: Any) -> str:
    # Matches the wire format so queries like '"slug":"home"' still hit.
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def _items(data: Any, key: str) -> List[Any]:
    if not isinstance(data, dict):
        return []
    items = data.get(key)
    return items if isinstance(items, list) else []


async def _run_tool(name: str, action: Callable[[], Awaitable[Any]]) -> ToolResult:
    """Run ``action`` and turn its outcome into a ToolResult.

    Strings are returned as-is, anything else is rendered as indented JSON.
    Every exception becomes an error result; nothing reaches the MCP host.
    """
    try:
        payload = await action()
    except StoryblokError as exc:
        logger.error("Error in %s tool: %s", name, exc)
        return ToolResult.error(str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error in %s tool", name)
        return ToolResult.error(str(exc) or type(exc).__name__)

    if isinstance(payload, str):
        return ToolResult.ok(payload)
    return ToolResult.ok(_dump(payload))


# ---------------------------------------------------------------------------
# Core async tasks (library-style)
# ---------------------------------------------------------------------------


async def ping(message: str) -> ToolResult:
    return ToolResult.ok(f"Server was pinged with the following message => {message}")


async def fetch_stories(context: RequestContext) -> ToolResult:
    async def action() -> Any:
        return await _make_client().list_stories(context)

    return await _run_tool("fetch-stories", action)


async def fetch_components(context: RequestContext) -> ToolResult:
    async def action() -> Any:
        return await _make_client().list_components(context)

    return await _run_tool("fetch-components", action)


async def fetch_assets(context: RequestContext) -> ToolResult:
    """List assets reduced to the fields an editor usually cares about."""

    async def action() -> Any:
        data = await _make_client().list_assets(context)
        return [
            AssetSummary.from_api(item).to_dict()
            for item in _items(data, "assets")
            if isinstance(item, dict)
        ]

    return await _run_tool("fetch-assets", action)


async def fetch_story_by_id(context: RequestContext, story_id: str) -> ToolResult:
    async def action() -> Any:
        return await _make_client().get_story(context, story_id)

    return await _run_tool("fetch-story-by-id", action)


async def search_content(context: RequestContext, query: str) -> ToolResult:
    """Case-insensitive substring search over whole serialised stories.

    Matching stories are returned in full, not as snippets.
    """

    async def action() -> Any:
        data = await _make_client().list_stories(context)
        needle = query.lower()
        results = [
            story
            for story in _items(data, "stories")
            if needle in _compact(story).lower()
        ]
        if not results:
            return f'No se encontraron resultados para: "{query}"'
        return results

    return await _run_tool("search-content", action)


async def fetch_seo_info(context: RequestContext) -> ToolResult:
    async def action() -> Any:
        data = await _make_client().list_stories(context)
        return [
            SeoInfo.from_story(story).to_dict()
            for story in _items(data, "stories")
            if isinstance(story, dict)
        ]

    return await _run_tool("fetch-seo-info", action)


async def set_space_id(session: StoryblokSession, space_id: str) -> ToolResult:
    region = session.set_space_id(space_id)
    kind = "forzada" if session.forced_region is not None else "detectada"
    return ToolResult.ok(
        f"El ID del espacio ha sido actualizado a: {space_id} "
        f"(región {kind}: {region.value})"
    )


async def set_region(session: StoryblokSession, region: Region) -> ToolResult:
    region = Region.parse(region)
    session.set_region(region)
    return ToolResult.ok(
        f"La región ha sido establecida a: {region.value} ({region.base_url})"
    )


async def get_session_info(session: StoryblokSession) -> ToolResult:
    """Redacted snapshot of the session and configuration (no secrets)."""
    cfg = _get_config()
    info: Dict[str, Any] = session.describe()
    info["token_configured"] = cfg.token_configured
    info["timeout_seconds"] = cfg.timeout_seconds
    info["verify_tls"] = cfg.verify_tls
    return ToolResult.ok(_dump(info))


# ---------------------------------------------------------------------------
# MCP tool registration
# ---------------------------------------------------------------------------


def register_tools(
    server: Any,
    session: StoryblokSession,
    config: Optional[StoryblokConfig] = None,
) -> None:
    """Register MCP tools on an MCP Server-like instance.

    ``session`` holds the active space and region. Every network tool takes
    a snapshot of it before doing any I/O. ``config`` supplies the token,
    timeout and TLS settings for every request; without it the environment
    is read on each call.
    """
    global _CONFIG

    if server is None or not hasattr(server, "tool"):
        raise ValueError(
            "register_tools(server, session, config) expects an MCP Server-like object that exposes a .tool() decorator."
        )

    _CONFIG = config

    @server.tool(
        name="ping",
        description="Ping the server to check that it is running.",
        structured_output=False,
    )
    async def mcp_ping(
        message: Annotated[str, Field(description="Your message")],
    ) -> CallToolResult:
        return (await ping(message)).to_call_tool_result()

    @server.tool(
        name="fetch-stories",
        description="Fetch the stories of the active Storyblok space.",
        structured_output=False,
    )
    async def mcp_fetch_stories() -> CallToolResult:
        return (await fetch_stories(session.snapshot())).to_call_tool_result()

    @server.tool(
        name="fetch-components",
        description="Fetch the component schemas of the active Storyblok space.",
        structured_output=False,
    )
    async def mcp_fetch_components() -> CallToolResult:
        return (await fetch_components(session.snapshot())).to_call_tool_result()

    @server.tool(
        name="fetch-assets",
        description=(
            "Fetch the assets (images and files) of the active Storyblok space, "
            "including name, file, size, alt text, folder, tags and more."
        ),
        structured_output=False,
    )
    async def mcp_fetch_assets() -> CallToolResult:
        return (await fetch_assets(session.snapshot())).to_call_tool_result()

    @server.tool(
        name="set-space-id",
        description="Set the ID of the Storyblok space to query.",
        structured_output=False,
    )
    async def mcp_set_space_id(
        spaceId: Annotated[str, Field(description="New Storyblok space ID")],  # noqa: N803
    ) -> CallToolResult:
        return (await set_space_id(session, spaceId)).to_call_tool_result()

    @server.tool(
        name="set-region",
        description=(
            "Force the Storyblok API region (eu, us, ap, ca, cn). "
            "Overrides detection from the space ID until set again."
        ),
        structured_output=False,
    )
    async def mcp_set_region(
        region: Annotated[Region, Field(description="Storyblok region")],
    ) -> CallToolResult:
        return (await set_region(session, region)).to_call_tool_result()

    @server.tool(
        name="search-content",
        description="Search for any term inside the content of the Storyblok stories.",
        structured_output=False,
    )
    async def mcp_search_content(
        query: Annotated[str, Field(description="Term to search for in story content")],
    ) -> CallToolResult:
        return (await search_content(session.snapshot(), query)).to_call_tool_result()

    @server.tool(
        name="fetch-story-by-id",
        description="Fetch the full content of a single story by its ID, including all fields.",
        structured_output=False,
    )
    async def mcp_fetch_story_by_id(
        storyId: Annotated[str, Field(description="ID of the story to fetch")],  # noqa: N803
    ) -> CallToolResult:
        return (await fetch_story_by_id(session.snapshot(), storyId)).to_call_tool_result()

    @server.tool(
        name="fetch-seo-info",
        description="Return SEO information (page title, meta description) for every story.",
        structured_output=False,
    )
    async def mcp_fetch_seo_info() -> CallToolResult:
        return (await fetch_seo_info(session.snapshot())).to_call_tool_result()

    @server.tool(
        name="get-session-info",
        description="Return the active space, region and base URL without exposing secrets.",
        structured_output=False,
    )
    async def mcp_get_session_info() -> CallToolResult:
        return (await get_session_info(session)).to_call_tool_result()
