"""Configuration for envreader-cli."""

from __future__ import annotations

from envreader.config import get_env


class CLIConfig:
    """CLI configuration from environment variables."""

    log_level: str = get_env("ENVREADER_LOG_LEVEL", "WARNING")
    log_format: str = get_env("ENVREADER_LOG_FORMAT", "console")


settings = CLIConfig()
