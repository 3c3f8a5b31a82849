"""
Netkit Core Library
===================
Address formatting and token/comparison helpers for networking services.
"""

__version__ = "0.1.0"

# Config
from netkit_core.config import DNS_SERVERS, TOKEN_ALPHABET

# Exceptions
from netkit_core.exceptions import (
    NetkitError,
    ParseError,
    InvalidAddressError,
    RandomSourceError,
)

# IP
from netkit_core.ip import (
    DualStackAddress,
    desensitize_ip,
    ip_to_binary,
    binary_to_ip,
    get_ip_from_header,
    split_ip_addr,
)

# Tokens
from netkit_core.tokens import generate_random_string

# Helpers
from netkit_core.helpers import (
    saturating_sub,
    format_integer,
    compare3,
    select_value,
    select_computed,
)

# JSON
from netkit_core.jsonutil import JSON, JSONCodec

# Filesystem
from netkit_core.fs import file_exists

__all__ = [
    # Config
    "DNS_SERVERS",
    "TOKEN_ALPHABET",
    # Exceptions
    "NetkitError",
    "ParseError",
    "InvalidAddressError",
    "RandomSourceError",
    # IP
    "DualStackAddress",
    "desensitize_ip",
    "ip_to_binary",
    "binary_to_ip",
    "get_ip_from_header",
    "split_ip_addr",
    # Tokens
    "generate_random_string",
    # Helpers
    "saturating_sub",
    "format_integer",
    "compare3",
    "select_value",
    "select_computed",
    # JSON
    "JSON",
    "JSONCodec",
    # Filesystem
    "file_exists",
]
