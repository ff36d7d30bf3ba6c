# Storyblok MCP Server
# File: tests/test_sanity.py
# Version: v1

"""Basic sanity tests for configuration loading."""

from storyblok_mcp.client import StoryblokClient
from storyblok_mcp.config import StoryblokConfig
from storyblok_mcp.regions import Region


def test_config_from_env_minimal(monkeypatch) -> None:
    for name in (
        "STORYBLOK_SPACE_ID",
        "STORYBLOK_MANAGEMENT_TOKEN",
        "STORYBLOK_REGION",
        "STORYBLOK_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = StoryblokConfig.from_env()
    assert config.space_id is None
    assert config.token_configured is False
    assert config.region is None
    assert config.timeout_seconds == 30
    assert config.verify_tls is True


def test_config_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("STORYBLOK_SPACE_ID", " 123456 ")
    monkeypatch.setenv("STORYBLOK_MANAGEMENT_TOKEN", "tok")
    monkeypatch.setenv("STORYBLOK_REGION", "CA")
    monkeypatch.setenv("STORYBLOK_TIMEOUT_SECONDS", "9999")
    monkeypatch.setenv("STORYBLOK_VERIFY_TLS", "off")
    monkeypatch.setenv("STORYBLOK_LOG_LEVEL", "debug")

    config = StoryblokConfig.from_env()
    assert config.space_id == "123456"
    assert config.management_token == "tok"
    assert config.region is Region.CA
    assert config.timeout_seconds == 300
    assert config.verify_tls is False
    assert config.log_level == "DEBUG"


def test_invalid_region_env_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("STORYBLOK_REGION", "moon")
    assert StoryblokConfig.from_env().region is None


def test_client_builds_from_env() -> None:
    client = StoryblokClient(config=StoryblokConfig.from_env())
    assert client.transport is None
