# Storyblok MCP Server
# File: tests/test_client_http.py
# Version: v1

"""StoryblokClient against an in-process httpx.MockTransport."""

from __future__ import annotations

from typing import List

import httpx
import pytest

from storyblok_mcp.client import StoryblokClient
from storyblok_mcp.config import StoryblokConfig
from storyblok_mcp.errors import (
    ConfigurationError,
    HttpError,
    ParseError,
    UnexpectedError,
)
from storyblok_mcp.regions import Region
from storyblok_mcp.session import StoryblokSession


def _client(handler, token: str | None = "mgmt-token") -> StoryblokClient:
    cfg = StoryblokConfig(space_id=None, management_token=token)
    return StoryblokClient(config=cfg, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_list_stories_hits_space_url_with_token():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"stories": [{"id": 1}]})

    ctx = StoryblokSession(space_id="123").snapshot()
    data = await _client(handler).list_stories(ctx)

    assert data == {"stories": [{"id": 1}]}
    assert str(seen[0].url) == "https://mapi.storyblok.com/v1/spaces/123/stories/"
    assert seen[0].method == "GET"
    assert seen[0].headers["Authorization"] == "mgmt-token"


@pytest.mark.asyncio
async def test_endpoints_follow_region():
    urls: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json={})

    session = StoryblokSession(space_id="77", forced_region=Region.AP)
    client = _client(handler)
    ctx = session.snapshot()

    await client.list_components(ctx)
    await client.list_assets(ctx)
    await client.get_story(ctx, "999")

    assert urls == [
        "https://api-ap.storyblok.com/v2/spaces/77/components/",
        "https://api-ap.storyblok.com/v2/spaces/77/assets/",
        "https://api-ap.storyblok.com/v2/spaces/77/stories/999",
    ]


@pytest.mark.asyncio
async def test_non_2xx_raises_http_error_with_status_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "Unauthorized"})

    ctx = StoryblokSession(space_id="123").snapshot()
    with pytest.raises(HttpError) as excinfo:
        await _client(handler).list_stories(ctx)

    assert excinfo.value.status_code == 401
    assert excinfo.value.reason == "Unauthorized"
    assert "Unauthorized" in str(excinfo.value)


@pytest.mark.asyncio
async def test_malformed_body_raises_parse_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    ctx = StoryblokSession(space_id="123").snapshot()
    with pytest.raises(ParseError):
        await _client(handler).list_components(ctx)


@pytest.mark.asyncio
async def test_network_failure_raises_unexpected_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    ctx = StoryblokSession(space_id="123").snapshot()
    with pytest.raises(UnexpectedError) as excinfo:
        await _client(handler).list_assets(ctx)

    assert "connection refused" in str(excinfo.value)


@pytest.mark.asyncio
async def test_missing_space_or_token_fails_before_request():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ConfigurationError):
        await _client(handler).list_stories(StoryblokSession().snapshot())

    with pytest.raises(ConfigurationError):
        await _client(handler, token=None).list_stories(
            StoryblokSession(space_id="1").snapshot()
        )


@pytest.mark.asyncio
async def test_redirects_are_followed():
    urls: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        if request.url.path.endswith("/stories/"):
            return httpx.Response(
                301, headers={"Location": "https://mapi.storyblok.com/v1/spaces/123/stories/moved"}
            )
        return httpx.Response(200, json={"stories": []})

    ctx = StoryblokSession(space_id="123").snapshot()
    data = await _client(handler).list_stories(ctx)

    assert data == {"stories": []}
    assert urls == [
        "https://mapi.storyblok.com/v1/spaces/123/stories/",
        "https://mapi.storyblok.com/v1/spaces/123/stories/moved",
    ]
