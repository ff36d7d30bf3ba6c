# Storyblok MCP Server
# File: regions.py
# Version: v1

"""Storyblok regions and base-URL resolution."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional


class Region(str, Enum):
    """Regional deployments of the Storyblok Management API."""

    EU = "eu"
    US = "us"
    AP = "ap"
    CA = "ca"
    CN = "cn"

    @property
    def base_url(self) -> str:
        return BASE_URLS[self]

    @classmethod
    def parse(cls, value: str) -> "Region":
        """Parse a case-insensitive region name, raising ValueError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(r.value for r in cls)
            raise ValueError(
                f"Unknown Storyblok region {value!r}. Expected one of: {allowed}."
            ) from None


BASE_URLS = {
    Region.EU: "https://mapi.storyblok.com/v1",
    Region.US: "https://api-us.storyblok.com/v1",
    Region.AP: "https://api-ap.storyblok.com/v2",
    Region.CA: "https://api-ca.storyblok.com/v2",
    Region.CN: "https://app.storyblokchina.cn",
}

DEFAULT_REGION = Region.EU

# Only US spaces are distinguishable by id. AP, CA and CN need an explicit
# override. This mapping is unverified against Storyblok's real id ranges.
_US_SPACE_ID = re.compile(r"^10\d+")


def detect_region(space_id: str) -> Region:
    """Guess the region a space lives in from its id."""
    if _US_SPACE_ID.match(str(space_id).strip()):
        return Region.US
    return Region.EU


def resolve_region(
    forced_region: Optional[Region],
    space_id: Optional[str],
) -> Region:
    if forced_region is not None:
        return forced_region
    if space_id:
        return detect_region(space_id)
    return DEFAULT_REGION


def resolve_base_url(
    forced_region: Optional[Region],
    space_id: Optional[str],
) -> str:
    """Return the API base URL for the given override and space id.

    The forced region wins; otherwise the region is detected from the space
    id, falling back to EU when no space is set.
    """
    return resolve_region(forced_region, space_id).base_url
