"""
IP Address Helpers
==================
Desensitization, binary conversion, header parsing and dual-stack
splitting for textual IP addresses.
"""

from .models import DualStackAddress
from .desensitize import desensitize_ip, desensitize_ipv4, desensitize_ipv6
from .codec import ip_to_binary, binary_to_ip, get_ip_from_header, parse_addr_port
from .dual_stack import split_ip_addr

__all__ = [
    # Models
    "DualStackAddress",
    # Desensitize
    "desensitize_ip",
    "desensitize_ipv4",
    "desensitize_ipv6",
    # Codec
    "ip_to_binary",
    "binary_to_ip",
    "get_ip_from_header",
    "parse_addr_port",
    # Dual stack
    "split_ip_addr",
]
