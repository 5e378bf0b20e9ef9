"""pathctl configuration and settings.

This module provides the configuration model and I/O functions for
pathctl's defaults. Every setting can also be given on the command
line, which takes precedence over the file.

Configuration is stored in ~/.config/pathctl/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathctl.core.environment import DEFAULT_ENV_VAR
from pathctl.core.paths import get_config_path


class PathctlConfig(BaseModel):
    """Default settings for pathctl commands.

    Attributes:
        env: Name of the environment variable holding the path.
        delimiter: Single-character path separator.
        filter: Drop entries that are not existing directories.
        normalize: Filter and resolve symbolic links.
        pretty: Print one directory per line.
        require_env: Fail if the environment variable is not set.
    """

    model_config = ConfigDict(extra="forbid")

    env: Annotated[
        str,
        Field(min_length=1, description="Environment variable name"),
    ] = DEFAULT_ENV_VAR
    delimiter: Annotated[
        str,
        Field(description="Path separator"),
    ] = os.pathsep
    filter: Annotated[
        bool,
        Field(description="Drop non-directories from the path"),
    ] = False
    normalize: Annotated[
        bool,
        Field(description="Filter and resolve symbolic links"),
    ] = False
    pretty: Annotated[
        bool,
        Field(description="Print one directory per line"),
    ] = False
    require_env: Annotated[
        bool,
        Field(description="Fail if the environment variable is unset"),
    ] = False

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Validate that the delimiter is exactly one character."""
        if len(v) != 1:
            msg = f"delimiter must be a single character, got {v!r}"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when a config file cannot be parsed."""


def load_config(path: Path | None = None) -> PathctlConfig:
    """Load configuration from a TOML file.

    A missing default config file yields the built-in defaults; a
    missing file that was asked for explicitly is an error.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PathctlConfig object.

    Raises:
        ConfigNotFoundError: If an explicit config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        return PathctlConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return PathctlConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: PathctlConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PathctlConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
