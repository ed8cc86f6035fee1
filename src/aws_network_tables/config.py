"""Plugin configuration loaded from YAML"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError
from .core.logging import get_logger

logger = get_logger("config")

CONFIG_DIR = Path.home() / ".config" / "aws-network-tables"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class PluginConfig(BaseModel):
    """Connection settings shared by every table.

    An empty regions list means every region enabled for the account.
    """

    profile: Optional[str] = None
    regions: list[str] = Field(default_factory=list)
    max_workers: int = Field(default=10, ge=1)
    max_attempts: int = Field(default=5, ge=1)

    @field_validator("regions")
    @classmethod
    def strip_regions(cls, v: list[str]) -> list[str]:
        return [r.strip() for r in v if r and r.strip()]

    def merged(self, **overrides) -> "PluginConfig":
        """Return a copy with any non-empty overrides applied (CLI flags)."""
        updates = {k: v for k, v in overrides.items() if v not in (None, [], ())}
        return self.model_copy(update=updates)


def load_config(path: Optional[Path] = None) -> PluginConfig:
    """Load config from path, or the default location if it exists."""
    explicit = path is not None
    path = Path(path) if path else CONFIG_FILE
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return PluginConfig()

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        config = PluginConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
    logger.debug("Loaded config from %s", path)
    return config
