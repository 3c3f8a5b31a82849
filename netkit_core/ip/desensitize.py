"""
IP Desensitization
==================
Textual masking of IP addresses for logs and display.

Both rules are plain regex rewrites. Nothing is parsed or validated, so
strings that merely look like addresses are masked too.
"""

import re

from ..config import MASK

_IPV4_PATTERN = re.compile(r"(\d*\.).*(\.\d*)", re.ASCII)
_IPV6_PATTERN = re.compile(r"(\w*:\w*:).*(:\w*:\w*)", re.ASCII)


def _keep_ends(match: "re.Match[str]") -> str:
    return f"{match.group(1)}{MASK}{match.group(2)}"


def desensitize_ipv4(address: str) -> str:
    """Mask everything between the first and last dotted groups."""
    return _IPV4_PATTERN.sub(_keep_ends, address)


def desensitize_ipv6(address: str) -> str:
    """Mask everything between the first two and last two colon groups."""
    return _IPV6_PATTERN.sub(_keep_ends, address)


def desensitize_ip(address: str) -> str:
    """
    Mask the middle of an IPv4 or IPv6 address.

    The IPv4 rule runs first, then the IPv6 rule on its output.
    Strings matching neither rule come back unchanged.

    Args:
        address: Any string, usually an IP address

    Returns:
        Masked string (e.g., "192.168.1.100" -> "192.****.100")
    """
    address = desensitize_ipv4(address)
    address = desensitize_ipv6(address)
    return address
