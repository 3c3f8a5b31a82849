"""
Netkit Core Configuration
=========================
Configuration constants and environment variables.
"""

import os
from typing import List

# Default upstream resolvers, host:port
DNS_SERVERS: List[str] = [
    server.strip()
    for server in os.getenv("NETKIT_DNS_SERVERS", "1.1.1.1:53,223.5.5.5:53").split(",")
    if server.strip()
]

# Replaces the hidden middle of a desensitized address
MASK = "****"

# Digits, uppercase, lowercase
TOKEN_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
