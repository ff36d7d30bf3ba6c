# Storyblok MCP Server
# File: session.py
# Version: v1

"""Active space / region state for a running server.

``StoryblokSession`` is the only mutable state in the process. Tool calls
never read it directly while talking to the API: each call takes a
``RequestContext`` snapshot up front, so a ``set-space-id`` issued while a
fetch is in flight cannot change the URL that fetch uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import StoryblokConfig
from .regions import Region, detect_region, resolve_region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Immutable view of the session for a single tool invocation."""

    space_id: Optional[str]
    region: Region
    region_source: str

    @property
    def base_url(self) -> str:
        return self.region.base_url

    def space_url(self, suffix: str) -> str:
        """Build ``{base_url}/spaces/{space_id}/{suffix}``."""
        return f"{self.base_url}/spaces/{self.space_id}/{suffix}"


@dataclass
class StoryblokSession:
    space_id: Optional[str] = None
    forced_region: Optional[Region] = None

    @classmethod
    def from_config(cls, config: StoryblokConfig) -> "StoryblokSession":
        return cls(space_id=config.space_id, forced_region=config.region)

    @property
    def active_region(self) -> Region:
        return resolve_region(self.forced_region, self.space_id)

    @property
    def region_source(self) -> str:
        if self.forced_region is not None:
            return "forced"
        if self.space_id:
            return "detected"
        return "default"

    def set_space_id(self, space_id: str) -> Region:
        """Switch the active space and return the region now in effect.

        A forced region is left untouched.
        """
        self.space_id = space_id
        region = self.active_region
        logger.info(
            "Active space set to %s (region %s, %s)",
            space_id,
            region.value,
            self.region_source,
        )
        return region

    def set_region(self, region: Region) -> None:
        """Force a region, overriding detection until set again."""
        self.forced_region = region
        logger.info("Region forced to %s (%s)", region.value, region.base_url)

    def snapshot(self) -> RequestContext:
        return RequestContext(
            space_id=self.space_id,
            region=self.active_region,
            region_source=self.region_source,
        )

    def describe(self) -> Dict[str, Any]:
        region = self.active_region
        detected = detect_region(self.space_id).value if self.space_id else None
        return {
            "space_id": self.space_id,
            "region": region.value,
            "region_source": self.region_source,
            "detected_region": detected,
            "forced_region": self.forced_region.value if self.forced_region else None,
            "base_url": region.base_url,
        }
