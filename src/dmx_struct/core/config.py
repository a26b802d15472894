"""
Configuration Management for dmx-struct.

Uses Pydantic Settings for type-safe configuration with environment
variable support and YAML file loading. The addressing rules themselves
are fixed constants in ``dmx_struct.dmx.universe``; settings only cover
how the command line front end behaves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dmx_struct.core.exceptions import ConfigError

OutputStyle = Literal["dotted", "absolute", "json"]


class OutputConfig(BaseModel):
    """How parsed addresses are rendered on the command line."""
    style: OutputStyle = "dotted"


class Settings(BaseSettings):
    """
    Main application settings.

    Can be configured via:
    - Environment variables (prefixed with DMX_STRUCT_)
    - YAML config file
    - Direct instantiation
    """

    model_config = SettingsConfigDict(
        env_prefix="DMX_STRUCT_",
        env_nested_delimiter="__",
    )

    output: OutputConfig = Field(default_factory=OutputConfig)

    # Debug
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(str(path), f"malformed YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)
