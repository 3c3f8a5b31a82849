"""
Netkit Exceptions
=================
Exception classes raised by the address and token helpers.
"""

from typing import Any, Optional


class NetkitError(Exception):
    """Base exception for all netkit-core errors."""

    def __init__(self, message: str, value: Optional[Any] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class ParseError(NetkitError, ValueError):
    """Raised when text is not a valid address or address:port."""
    pass


class InvalidAddressError(NetkitError, ValueError):
    """Raised when an address parses but is not usable (e.g. 0.0.0.0)."""
    pass


class RandomSourceError(NetkitError, RuntimeError):
    """Raised when the OS entropy source cannot supply bytes."""
    pass
