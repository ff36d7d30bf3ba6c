# Storyblok MCP Server
# File: client.py
# Version: v1
"""High-level client for the Storyblok Management API.

Implements:

- list_stories() via /spaces/<id>/stories/
- list_components() via /spaces/<id>/components/
- list_assets() via /spaces/<id>/assets/
- get_story() via /spaces/<id>/stories/<story_id>

Every method issues exactly one GET against the base URL carried by the
``RequestContext`` it is given, and maps failures onto ``errors``.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Optional

import httpx
from httpx import HTTPStatusError, RequestError

from .config import StoryblokConfig
from .errors import ConfigurationError, HttpError, ParseError, UnexpectedError
from .session import RequestContext

logger = logging.getLogger(__name__)


@dataclass
class StoryblokClient:
    """Wrapper around the Storyblok Management API."""

    config: StoryblokConfig

    # Lets tests plug in httpx.MockTransport; None means real network.
    transport: Optional[httpx.AsyncBaseTransport] = None

    # ------------------------------------------------------------------
    # Stories
    # ------------------------------------------------------------------

    async def list_stories(self, context: RequestContext) -> Any:
        return await self._get_json(context, "stories/", "stories")

    async def get_story(self, context: RequestContext, story_id: str) -> Any:
        return await self._get_json(context, f"stories/{story_id}", f"story '{story_id}'")

    # ------------------------------------------------------------------
    # Components & assets
    # ------------------------------------------------------------------

    async def list_components(self, context: RequestContext) -> Any:
        return await self._get_json(context, "components/", "components")

    async def list_assets(self, context: RequestContext) -> Any:
        return await self._get_json(context, "assets/", "assets")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        if not self.config.management_token:
            raise ConfigurationError(
                "STORYBLOK_MANAGEMENT_TOKEN is not set. "
                "Please configure it before calling the Storyblok API."
            )
        # Personal access tokens go in verbatim, without a scheme prefix.
        return {
            "Authorization": self.config.management_token,
            "Accept": "application/json",
        }

    async def _get_json(self, context: RequestContext, suffix: str, what: str) -> Any:
        """GET ``suffix`` under the active space and decode the JSON body."""
        if not context.space_id:
            raise ConfigurationError(
                "No active Storyblok space. Set STORYBLOK_SPACE_ID or call "
                "the set-space-id tool first."
            )

        headers = self._headers()
        url = context.space_url(suffix)
        logger.debug("GET %s (region %s)", url, context.region.value)

        async with httpx.AsyncClient(
            timeout=float(self.config.timeout_seconds),
            verify=self.config.verify_tls,
            follow_redirects=True,
            transport=self.transport,
        ) as http_client:
            try:
                response = await http_client.get(url, headers=headers)
            except RequestError as exc:
                raise UnexpectedError(
                    f"Error calling Storyblok API at '{url}': {exc}"
                ) from exc

            try:
                response.raise_for_status()
            except HTTPStatusError as exc:
                status = response.status_code
                reason = response.reason_phrase
                raise HttpError(
                    f"Failed to fetch {what}: {reason} (HTTP {status})",
                    status_code=status,
                    reason=reason,
                    url=url,
                ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(
                f"Storyblok returned invalid JSON for {what} from '{url}': {exc}"
            ) from exc
