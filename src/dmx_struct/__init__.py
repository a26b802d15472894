"""
dmx-struct: DMX512 address parsing and formatting

Converts text in dotted (``universe.channel``) or absolute notation into
a validated address value holding universe, channel and absolute index,
and renders it back as ``universe.channel``.
"""

__version__ = "0.1.0"
__author__ = "dmx-struct contributors"

from dmx_struct.core.exceptions import DMXStructError, InvalidDMXAddressError
from dmx_struct.dmx.address import DMXAddress, format_address, parse_address

__all__ = [
    "DMXAddress",
    "parse_address",
    "format_address",
    "DMXStructError",
    "InvalidDMXAddressError",
    "__version__",
]
