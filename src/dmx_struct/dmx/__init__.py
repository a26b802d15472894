"""DMX addressing helpers."""

from dmx_struct.dmx.address import DMXAddress, format_address, parse_address
from dmx_struct.dmx.universe import (
    DMX_ABSOLUTE_MAX,
    DMX_ABSOLUTE_MIN,
    DMX_CHANNEL_COUNT,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    DMX_UNIVERSE_MAX,
    DMX_UNIVERSE_MIN,
    is_valid_dmx_channel,
    is_valid_dmx_universe,
    split_absolute,
    to_absolute,
)

__all__ = [
    "DMXAddress",
    "parse_address",
    "format_address",
    "DMX_CHANNEL_COUNT",
    "DMX_CHANNEL_MIN",
    "DMX_CHANNEL_MAX",
    "DMX_UNIVERSE_MIN",
    "DMX_UNIVERSE_MAX",
    "DMX_ABSOLUTE_MIN",
    "DMX_ABSOLUTE_MAX",
    "is_valid_dmx_channel",
    "is_valid_dmx_universe",
    "split_absolute",
    "to_absolute",
]
