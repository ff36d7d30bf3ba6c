# demo_mcp_search_content.py
# Version: v1

r"""
Quick demo for the search_content() MCP task.

Usage (bash):

  export STORYBLOK_SPACE_ID="123456"
  export STORYBLOK_MANAGEMENT_TOKEN="..."
  export STORYBLOK_TEST_SEARCH="home"
  export STORYBLOK_TEST_REGION="us"   # optional
  python demo_mcp_search_content.py
"""

import asyncio
import json
import os

from storyblok_mcp.config import StoryblokConfig
from storyblok_mcp.regions import Region
from storyblok_mcp.session import StoryblokSession
from storyblok_mcp.tools.tasks import search_content


QUERY = os.environ.get("STORYBLOK_TEST_SEARCH", "home")
REGION = os.environ.get("STORYBLOK_TEST_REGION") or None


async def main() -> None:
    session = StoryblokSession.from_config(StoryblokConfig.from_env())
    if REGION:
        session.set_region(Region.parse(REGION))

    ctx = session.snapshot()
    print("Calling MCP task: search_content()")
    print(f"Space:    {ctx.space_id!r}")
    print(f"Base URL: {ctx.base_url}")
    print(f"Query:    {QUERY!r}")
    print()

    result = await search_content(ctx, QUERY)
    if result.is_error:
        print(result.text)
        return

    try:
        stories = json.loads(result.text)
    except ValueError:
        # "No results" message
        print(result.text)
        return

    print("Matches:", len(stories))
    for story in stories:
        print(f"- {story.get('name')} (id={story.get('id')}, slug={story.get('full_slug') or story.get('slug')})")


if __name__ == "__main__":
    asyncio.run(main())
