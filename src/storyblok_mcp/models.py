# Storyblok MCP Server
# File: models.py
# Version: v1

"""Domain models used by the Storyblok MCP server."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from mcp.types import CallToolResult, TextContent

_BYTES_PER_MB = 1024 * 1024


def _size_mb(size: Any) -> Optional[str]:
    if not size:
        return None
    # Half-up on ties, the way JavaScript toFixed(2) reports sizes.
    mb = Decimal(size) / Decimal(_BYTES_PER_MB)
    return str(mb.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass
class AssetSummary:
    """Reduced view of a Storyblok asset as returned by /assets/."""

    id: Any
    filename: Optional[str] = None
    name: Optional[str] = None
    size_bytes: Optional[int] = None
    size_mb: Optional[str] = None
    alt: Optional[str] = None
    folder: Any = None
    tags: Optional[List[Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    copyright: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "AssetSummary":
        size = item.get("size")
        return cls(
            id=item.get("id"),
            filename=item.get("filename"),
            name=item.get("name"),
            size_bytes=size,
            size_mb=_size_mb(size),
            alt=item.get("alt"),
            folder=item.get("asset_folder_id"),
            tags=item.get("asset_tags"),
            created_at=item.get("created_at"),
            updated_at=item.get("updated_at"),
            copyright=item.get("copyright"),
            content_type=item.get("content_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SeoInfo:
    """SEO fields pulled out of a story's content."""

    id: Any
    name: Optional[str]
    slug: Optional[str]
    page_title: str = ""
    meta_description: str = ""

    @classmethod
    def from_story(cls, story: Dict[str, Any]) -> "SeoInfo":
        content = story.get("content") or {}
        if not isinstance(content, dict):
            content = {}
        return cls(
            id=story.get("id"),
            name=story.get("name"),
            slug=story.get("slug"),
            page_title=content.get("seo_title") or content.get("title") or "",
            meta_description=(
                content.get("seo_description") or content.get("description") or ""
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ToolResult:
    """Outcome of a tool call: a single text block, optionally flagged as an error."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )
