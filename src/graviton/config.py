"""Configuration management for graviton."""

import tomllib
from datetime import timedelta
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE_NAME, DEFAULT_MAX_HISTORY_SIZE, DEFAULT_REFRESH_INTERVAL_HOURS
from .errors import ConfigError


class HistoryConfig(BaseModel):
    """Limits for the resolution history."""

    max_size: int = Field(
        default=DEFAULT_MAX_HISTORY_SIZE, ge=1, description="Maximum remembered entries"
    )
    refresh_interval_hours: float = Field(
        default=DEFAULT_REFRESH_INTERVAL_HOURS,
        gt=0,
        description="Age after which a cached resolution is resolved again",
    )

    @property
    def refresh_interval(self) -> timedelta:
        return timedelta(hours=self.refresh_interval_hours)


class GravitonConfig(BaseModel):
    """Root configuration for graviton."""

    history: HistoryConfig = Field(default_factory=HistoryConfig)


def load_config(cache_dir: Path) -> GravitonConfig:
    """Load config from <cache_dir>/config.toml.

    Args:
        cache_dir: Graviton cache directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = cache_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return GravitonConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return GravitonConfig.model_validate(data)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(config_path, str(e)) from e
    except ValidationError as e:
        raise ConfigError(config_path, str(e)) from e


def write_config_template(cache_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        cache_dir: Graviton cache directory

    Returns:
        Path to the written config file
    """
    config_path = cache_dir / CONFIG_FILE_NAME
    template = {
        "history": {
            "max_size": DEFAULT_MAX_HISTORY_SIZE,
            "refresh_interval_hours": DEFAULT_REFRESH_INTERVAL_HOURS,
        },
    }
    cache_dir.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
