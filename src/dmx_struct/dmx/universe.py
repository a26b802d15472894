"""Canonical DMX512 universe sizing and addressing helpers."""

from __future__ import annotations

DMX_CHANNEL_COUNT = 512
DMX_CHANNEL_MIN = 1
DMX_CHANNEL_MAX = DMX_CHANNEL_COUNT

# sACN supports at most 63999 universes.
DMX_UNIVERSE_MIN = 1
DMX_UNIVERSE_MAX = 63_999

DMX_ABSOLUTE_MIN = 1
DMX_ABSOLUTE_MAX = DMX_CHANNEL_MAX + (DMX_UNIVERSE_MAX - 1) * DMX_CHANNEL_COUNT


def is_valid_dmx_channel(channel: int) -> bool:
    """Return True when a channel index is a valid 1-based DMX slot."""
    return DMX_CHANNEL_MIN <= channel <= DMX_CHANNEL_MAX


def is_valid_dmx_universe(universe: int) -> bool:
    """Return True when a universe number is within the supported range."""
    return DMX_UNIVERSE_MIN <= universe <= DMX_UNIVERSE_MAX


def to_absolute(universe: int, channel: int) -> int:
    """Flatten a universe/channel pair into an absolute address.

    No range checks are applied, callers validate the pair afterwards.
    """
    return channel + (universe - 1) * DMX_CHANNEL_COUNT


def split_absolute(absolute: int) -> tuple[int, int]:
    """
    Split an absolute address into ``(universe, channel)``.

    Channels are 1-based, so a zero remainder is the last slot (512) of the
    universe already counted by the division, not slot 0 of the next one.
    """
    universe, channel = divmod(absolute, DMX_CHANNEL_COUNT)
    if channel == 0:
        return universe, DMX_CHANNEL_MAX
    return universe + 1, channel
