"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:       str = "mdimport"
    posts_dir:      str = Field(default="posts",   description="Directory for converted documents")
    assets_dirname: str = Field(default="assets",  description="Assets folder name under posts_dir")
    diagram_lang:   str = Field(default="mermaid", description="Fence info marking a diagram block")
    renderer:       str = Field(default="mmdc",    description="Diagram renderer executable")
    background:     str = Field(default="transparent", description="Diagram background colour")
    render_timeout: Optional[float] = Field(default=None, gt=0, description="Seconds per render; None = unbounded")
    bullet:         str = Field(default="*", pattern=r"^[-*+]$", description="Bullet list marker")
    fence:          str = Field(default="`", pattern=r"^[`~]$",  description="Code fence character")
    number:         bool = Field(default=False, description="Increment ordered list numbers")
    default_title:       str = "Example article title"
    default_description: str = "A simple test article"
    log_level:      str = Field(default="INFO", description="Logging level name")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDIMPORT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDIMPORT_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
