"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: Page fetching settings
- ProviderConfig: Summarization service credentials and transport settings
- OutputConfig: Document rendering settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

The summarization request parameters themselves (model, temperature, token
limit, ...) are not configurable; see ``llm.providers.groq.REQUEST_POLICY``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for fetching the article page.

    Attributes:
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
    """

    timeout_seconds: float = 30.0
    trust_env: bool = True


@dataclass
class ProviderConfig:
    """Configuration for the summarization service.

    Attributes:
        api_key_env: Environment variable holding the API key
        api_key: Inline API key, takes precedence over the environment
        timeout_seconds: HTTP request timeout for the completion call
        trust_env: Whether to respect system proxy settings
    """

    api_key_env: str = "GROQ_API_KEY"
    api_key: str | None = None
    timeout_seconds: float = 60.0
    trust_env: bool = True


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        template_path: Optional path to a custom Jinja2 article template;
            the bundled ``templates/article.md`` is used when unset
    """

    template_path: str | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file; file logging is skipped when unset
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "article-report.jsonl"
    directory: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return _fromdict(asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping at top level")
    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        provider=ProviderConfig(**data["provider"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_api_key(cfg: ProviderConfig) -> str | None:
    """Get API key from inline config or environment variable."""
    if cfg.api_key:
        return cfg.api_key
    return os.getenv(cfg.api_key_env) or None
