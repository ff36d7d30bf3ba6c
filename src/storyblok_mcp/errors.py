# Storyblok MCP Server
# File: errors.py
# Version: v1

"""Error taxonomy for calls against the Storyblok Management API.

Tool handlers never let these escape to the MCP host; they are converted
into error results by ``tools.tasks._run_tool``.
"""

from __future__ import annotations

from typing import Optional


class StoryblokError(RuntimeError):
    """Base class for every fault raised while serving a tool call."""


class ConfigurationError(StoryblokError):
    """Raised before any request when the space id or token is missing."""


class HttpError(StoryblokError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        reason: str,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.url = url


class ParseError(StoryblokError):
    """The response body was not valid JSON."""


class UnexpectedError(StoryblokError):
    """Network failures and any other fault outside the taxonomy above."""
