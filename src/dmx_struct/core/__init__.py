"""Core system components for dmx-struct."""

from dmx_struct.core.config import OutputConfig, Settings
from dmx_struct.core.exceptions import (
    ConfigError,
    DMXError,
    DMXStructError,
    InvalidDMXAddressError,
)

__all__ = [
    "Settings",
    "OutputConfig",
    "DMXStructError",
    "DMXError",
    "InvalidDMXAddressError",
    "ConfigError",
]
