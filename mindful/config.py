"""
Configuration models for MindfulTask (args/mindful.yaml).

Every section has defaults, so a missing file or a partial file still
produces a complete configuration. The file location can be overridden
with the MINDFUL_CONFIG environment variable.

Usage:
    from mindful.config import load_config
    config = load_config()
    config.ai.model
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mindful import CONFIG_PATH, DATA_DIR, PROJECT_ROOT

logger = logging.getLogger(__name__)


class StorageConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    db_path: str = Field(default=str(DATA_DIR / "mindful.db"))
    tasks_key: str = Field(default="mindful-tasks")
    theme_key: str = Field(default="mindful-theme")

    def resolved_db_path(self) -> Path:
        path = Path(self.db_path)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


class AIConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    api_key_env: str = Field(default="ANTHROPIC_API_KEY")
    model: str = Field(default="claude-3-5-haiku-latest")
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=0, ge=0)
    breakdown_max_tokens: int = Field(default=1024, ge=1)
    encouragement_max_tokens: int = Field(default=128, ge=1)

    def api_key(self) -> str:
        return os.environ.get(self.api_key_env, "")


class NotificationsConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    enabled: bool = Field(default=True)
    permission_timeout_seconds: float = Field(default=30.0, gt=0)
    icon: str = Field(default="https://cdn-icons-png.flaticon.com/512/2693/2693507.png")
    toast_seconds: float = Field(default=4.0, gt=0)


class DashboardConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8080, ge=1, le=65535)
    allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )


class MindfulConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    storage: StorageConfig = Field(default_factory=StorageConfig)
    ai: AIConfig = Field(default_factory=AIConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)


def config_path() -> Path:
    override = os.environ.get("MINDFUL_CONFIG")
    return Path(override) if override else CONFIG_PATH


def load_config(path: Optional[Path] = None) -> MindfulConfig:
    """Load configuration from YAML, falling back to defaults on any problem."""
    path = path or config_path()
    if not path.exists():
        return MindfulConfig()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"expected a mapping, got {type(raw).__name__}")
        return MindfulConfig.model_validate(raw.get("mindful", raw))
    except (yaml.YAMLError, ValidationError, ValueError, OSError) as e:
        logger.warning(f"Invalid config at {path}, using defaults: {e}")
        return MindfulConfig()


__all__ = [
    "AIConfig",
    "DashboardConfig",
    "MindfulConfig",
    "NotificationsConfig",
    "StorageConfig",
    "load_config",
]
