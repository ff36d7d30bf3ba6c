# Storyblok MCP Server
# File: config.py
# Version: v1

"""Configuration loading for the Storyblok MCP Server."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from .regions import Region

logger = logging.getLogger(__name__)


def _parse_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean-like environment variable.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _parse_int_env(
    name: str,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Parse an int environment variable with clamping and safe fallback."""
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        value = int(default)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = int(default)

    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value

    return value


def _parse_region_env(name: str) -> Region | None:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return None
    try:
        return Region.parse(raw)
    except ValueError as exc:
        logger.warning("Ignoring %s: %s", name, exc)
        return None


def _empty_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class StoryblokConfig:
    """Configuration values required to talk to the Storyblok Management API."""

    space_id: str | None
    management_token: str | None

    # Initial region override. None means "detect from the space id".
    region: Region | None = None

    timeout_seconds: int = 30
    verify_tls: bool = True
    log_level: str = "INFO"

    @property
    def token_configured(self) -> bool:
        return bool(self.management_token)

    @classmethod
    def from_env(cls) -> "StoryblokConfig":
        """Create configuration from environment variables."""
        space_id = _empty_to_none(os.getenv("STORYBLOK_SPACE_ID"))
        management_token = _empty_to_none(os.getenv("STORYBLOK_MANAGEMENT_TOKEN"))
        region = _parse_region_env("STORYBLOK_REGION")

        timeout_seconds = _parse_int_env(
            "STORYBLOK_TIMEOUT_SECONDS", default=30, min_value=1, max_value=300
        )
        verify_tls = _parse_bool_env("STORYBLOK_VERIFY_TLS", default=True)
        log_level = (os.getenv("STORYBLOK_LOG_LEVEL") or "INFO").strip().upper()

        return cls(
            space_id=space_id,
            management_token=management_token,
            region=region,
            timeout_seconds=timeout_seconds,
            verify_tls=verify_tls,
            log_level=log_level,
        )
