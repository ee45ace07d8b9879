"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDBLOG_"


class Settings(BaseModel):
    app_name:       str = "mdblog"
    content_dir:    str = Field(default="content/posts", description="Directory holding the post sources")
    include_drafts: bool = Field(default=False, description="Publish documents marked draft: true")
    include_future: bool = Field(default=True,  description="Publish documents dated after now")
    extensions:     list[str] = Field(default=[".md", ".markdown", ".mdx"], description="Source file suffixes")
    summary_words:  int = Field(default=70, ge=1, description="Words kept in an automatic summary")
    log_level:      str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, v: Any) -> Any:
        """Accept a comma-separated string (env vars) as well as a list."""
        if isinstance(v, str):
            v = [s.strip() for s in v.split(",") if s.strip()]
        return [e if e.startswith(".") else f".{e}" for e in v] if isinstance(v, list) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
