"""Pydantic settings for chunkhash configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from chunkhash.core.accumulator import DEFAULT_CHUNK_SIZE, DEFAULT_SEED
from chunkhash.exceptions import InvalidConfigurationError, SourceReadError
from chunkhash.sources import DEFAULT_BLOCK_SIZE


def get_config_dir() -> Path:
    """Get the configuration directory."""
    return Path.home() / ".chunkhash"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if it exists.

    Returns:
        Dictionary of configuration values, or empty dict if file doesn't exist.
    """
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                return yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError):
            # Malformed or unreadable config falls back to defaults
            return {}
    return {}


class HashingSettings(BaseModel):
    """Settings for chunk hashing."""

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    seed: int = Field(default=DEFAULT_SEED, ge=-(1 << 63), lt=1 << 64)
    secret_file: Path | None = None

    def load_secret(self) -> bytes | None:
        """Read the secret file, if one is configured."""
        if self.secret_file is None:
            return None
        path = self.secret_file.expanduser()
        try:
            return path.read_bytes()
        except OSError as e:
            raise SourceReadError(
                f"Cannot read secret file: {path}",
                path=path,
                details=str(e),
            ) from e


class IOSettings(BaseModel):
    """Settings for reading sources."""

    block_size: int = Field(default=DEFAULT_BLOCK_SIZE, gt=0)


class OutputSettings(BaseModel):
    """Settings for output."""

    format: Literal["hex", "int"] = "hex"


class Settings(BaseSettings):
    """Main settings model for chunkhash."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKHASH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    hashing: HashingSettings = Field(default_factory=HashingSettings)
    io: IOSettings = Field(default_factory=IOSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from (in order of priority, highest first):
    1. YAML config file (~/.chunkhash/config.yaml), per top-level section
    2. Environment variables (CHUNKHASH_* prefix)
    3. Default values

    Raises:
        InvalidConfigurationError: If a configured value is out of range.
    """
    yaml_config = _load_yaml_config()
    try:
        return Settings(**yaml_config)
    except ValidationError as e:
        raise InvalidConfigurationError(
            "Invalid chunkhash configuration",
            details=str(e),
            hint=f"Check CHUNKHASH_* environment variables and {get_config_path()}",
        ) from e
