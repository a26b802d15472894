"""
Custom Exceptions for dmx-struct.

Provides a small hierarchy so callers can catch every package error at
once or only the DMX addressing failures.
"""

from __future__ import annotations


class DMXStructError(Exception):
    """Base exception for all dmx-struct errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


# =============================================================================
# DMX Errors
# =============================================================================


class DMXError(DMXStructError):
    """Base exception for DMX-related errors."""
    pass


class InvalidDMXAddressError(DMXError, ValueError):
    """
    Text could not be converted into a DMX address.

    Raised for every rejection cause alike: bad syntax, non-numeric parts,
    numeric overflow and out-of-range universe or channel. The offending
    input is intentionally not kept.
    """

    def __init__(self) -> None:
        super().__init__("invalid DMX address", recoverable=True)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(DMXStructError):
    """Invalid or unreadable configuration."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Configuration error in {source}: {reason}",
            recoverable=False
        )
        self.source = source
        self.reason = reason
