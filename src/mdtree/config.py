"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:        str = "mdtree"
    store_dir:       str = Field(default=".mdtree/pages", description="JSON store for imported notes")
    output_dir:      str = Field(default="dist",          description="Directory for exported Markdown files")
    wikilink_prefix: str = Field(default="/workspace/pages/", description="href prefix for resolved [[wikilinks]]")
    content_format:  str = Field(default="tree", pattern="^(tree|tiptap)$", description="tree or tiptap")
    log_level:       str = Field(default="WARNING",       description="Root logging level name")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDTREE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDTREE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
