"""
Configuration management for emotiontone using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://itsKrish01-emotion-checker.hf.space"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_USER_AGENT = "emotiontone/0.1.0 (+https://pypi.org/project/emotiontone/)"

# --- Nested Configuration Models ---


class ClientConfig(BaseModel):
    """Connection settings for the emotion API. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the emotion API.")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds.")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent string for HTTP requests.")

    @field_validator("base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, v: Optional[str]) -> str:
        if not v:
            return DEFAULT_BASE_URL
        return str(v).rstrip("/")


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus request metrics.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "emotiontone"
    client: ClientConfig = Field(default_factory=ClientConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="EMOTIONTONE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data: Any = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "emotiontone.yaml",
        current_dir / "emotiontone.yml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path
    return None
