"""
Random Tokens
=============
Cryptographically secure random string generation.
"""

import secrets

import structlog

from .config import TOKEN_ALPHABET
from .exceptions import RandomSourceError

logger = structlog.get_logger(__name__)


def generate_random_string(length: int) -> str:
    """
    Generate a secure random alphanumeric string.

    Each character is drawn independently from the OS CSPRNG.

    Args:
        length: Number of characters; zero or less gives ""

    Returns:
        Random string over TOKEN_ALPHABET

    Raises:
        RandomSourceError: If the OS entropy source fails
    """
    if length <= 0:
        return ""

    try:
        return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
    except (OSError, NotImplementedError) as exc:
        logger.error("Secure random source unavailable", error=str(exc))
        raise RandomSourceError("secure random source unavailable") from exc
