"""
IP Models
=========
Result types for address helpers.
"""

from typing import NamedTuple


class DualStackAddress(NamedTuple):
    """A split "v4/v6" bundle. Empty strings mark a missing family."""
    ipv4: str
    ipv6: str
    preferred: str
