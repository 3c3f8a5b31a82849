"""
Dual-Stack Splitting
====================
Split "v4/v6" address bundles into their parts.
"""

from .models import DualStackAddress


def split_ip_addr(bundle: str) -> DualStackAddress:
    """
    Split a "/"-separated v4/v6 bundle.

    With both families present IPv4 is preferred. A single value is
    classified by whether it contains ":". Segments past the second are
    ignored and nothing is validated.

    Args:
        bundle: e.g. "10.0.0.1/::1", "10.0.0.1" or "::1"

    Returns:
        DualStackAddress of (ipv4, ipv6, preferred)
    """
    if not bundle:
        return DualStackAddress("", "", "")

    parts = bundle.split("/")
    if len(parts) > 1:
        # Dual stack
        return DualStackAddress(parts[0], parts[1], parts[0])

    if ":" in bundle:
        return DualStackAddress("", bundle, bundle)
    return DualStackAddress(bundle, "", bundle)
