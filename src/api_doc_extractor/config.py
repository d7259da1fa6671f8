"""Extraction configuration.

The configuration doubles as the per-route override set: its ``headers``
are applied to every documented route (minus ``Authorization`` on routes
that are not authenticated).
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from api_doc_extractor.errors import ConfigError
from api_doc_extractor.resolver.group import DEFAULT_GROUP


class ExtractionConfig(BaseModel):
    headers: dict[str, str] = Field(default_factory=dict)
    default_group: str = DEFAULT_GROUP
    response_file_dir: Path | None = None
    workers: int = Field(default=1, ge=1)
    seed: int | None = None


def load_config(path: Path | None = None) -> ExtractionConfig:
    """Load configuration from a YAML file; no path means defaults."""
    if path is None:
        return ExtractionConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    try:
        config = ExtractionConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
    if config.response_file_dir is not None and not config.response_file_dir.is_absolute():
        config.response_file_dir = path.parent / config.response_file_dir
    return config
