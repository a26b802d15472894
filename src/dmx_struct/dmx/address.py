"""
DMX address value and its text conversions.

Two notations are understood:

- dotted, ``"<universe>.<channel>"`` (e.g. ``"1.234"``)
- absolute, the flattened index alone (e.g. ``"1024"``)

Every malformed or out-of-range input raises ``InvalidDMXAddressError``;
nothing is logged here, callers decide what a rejection means.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dmx_struct.core.exceptions import InvalidDMXAddressError
from dmx_struct.dmx.universe import (
    DMX_ABSOLUTE_MAX,
    DMX_ABSOLUTE_MIN,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    DMX_UNIVERSE_MAX,
    DMX_UNIVERSE_MIN,
    is_valid_dmx_channel,
    is_valid_dmx_universe,
    split_absolute,
    to_absolute,
)

SEPARATOR = "."

# Numeric parts are read as unsigned 32-bit integers.
_UINT32_MAX = 0xFFFF_FFFF
_UINT_PATTERN = re.compile(r"\+?[0-9]+")


class DMXAddress(BaseModel):
    """
    A validated DMX address.

    Holds both the universe/channel split and the absolute address, so no
    calculation is needed by consumers. Instances are immutable, hashable
    and compare equal when all three fields match.

    Besides keyword construction, pydantic validation accepts a text token
    in either notation, so a ``DMXAddress`` field in a settings model can
    be written as ``"2.001"`` or ``513`` in YAML.
    """

    model_config = ConfigDict(frozen=True)

    universe: int = Field(ge=DMX_UNIVERSE_MIN, le=DMX_UNIVERSE_MAX)
    channel: int = Field(ge=DMX_CHANNEL_MIN, le=DMX_CHANNEL_MAX)
    absolute: int = Field(ge=DMX_ABSOLUTE_MIN, le=DMX_ABSOLUTE_MAX)

    @model_validator(mode="before")
    @classmethod
    def _coerce_token(cls, data: Any) -> Any:
        if isinstance(data, (str, int)) and not isinstance(data, bool):
            address = parse_address(str(data))
            return {
                "universe": address.universe,
                "channel": address.channel,
                "absolute": address.absolute,
            }
        return data

    @model_validator(mode="after")
    def _check_absolute(self) -> "DMXAddress":
        if self.absolute != to_absolute(self.universe, self.channel):
            raise ValueError(
                f"absolute {self.absolute} does not match "
                f"universe {self.universe} channel {self.channel}"
            )
        return self

    @classmethod
    def parse(cls, text: str) -> "DMXAddress":
        """Parse dotted or absolute notation. See ``parse_address``."""
        return parse_address(text)

    @classmethod
    def from_parts(cls, universe: int, channel: int) -> "DMXAddress":
        """Build an address from a universe number and a 1-based channel."""
        if not _is_int(universe) or not _is_int(channel) or universe == 0:
            raise InvalidDMXAddressError()
        return _build(universe, channel, to_absolute(universe, channel))

    @classmethod
    def from_absolute(cls, absolute: int) -> "DMXAddress":
        """Build an address from its flattened index."""
        if not _is_int(absolute):
            raise InvalidDMXAddressError()
        universe, channel = split_absolute(absolute)
        return _build(universe, channel, absolute)

    def __str__(self) -> str:
        return format_address(self)


def parse_address(text: str) -> DMXAddress:
    """
    Convert a text token into a ``DMXAddress``.

    A token containing ``.`` must be exactly ``<universe>.<channel>``;
    anything else is read as an absolute address. Parts must be plain
    non-negative decimal integers that fit in 32 bits.

    Raises:
        InvalidDMXAddressError: for any malformed or out-of-range token.
    """
    if not isinstance(text, str):
        raise InvalidDMXAddressError()

    if SEPARATOR in text:
        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            raise InvalidDMXAddressError()
        universe = _parse_uint(parts[0])
        if universe == 0:
            raise InvalidDMXAddressError()
        channel = _parse_uint(parts[1])
        return DMXAddress.from_parts(universe, channel)

    return DMXAddress.from_absolute(_parse_uint(text))


def format_address(address: DMXAddress) -> str:
    """Render ``<universe>.<channel>`` with the channel padded to 3 digits."""
    return f"{address.universe}.{address.channel:03d}"


def _parse_uint(text: str) -> int:
    if _UINT_PATTERN.fullmatch(text) is None:
        raise InvalidDMXAddressError()
    try:
        value = int(text)
    except ValueError:
        # Beyond the interpreter's digit limit, far past 32 bits anyway.
        raise InvalidDMXAddressError() from None
    if value > _UINT32_MAX:
        raise InvalidDMXAddressError()
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _build(universe: int, channel: int, absolute: int) -> DMXAddress:
    if not is_valid_dmx_universe(universe) or not is_valid_dmx_channel(channel):
        raise InvalidDMXAddressError()
    return DMXAddress(universe=universe, channel=channel, absolute=absolute)
