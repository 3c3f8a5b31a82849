"""
Generic Helpers
===============
Numeric and comparison utilities shared across services.
"""

from .numeric import saturating_sub, format_integer
from .compare import compare3, select_value, select_computed

__all__ = [
    # Numeric
    "saturating_sub",
    "format_integer",
    # Compare
    "compare3",
    "select_value",
    "select_computed",
]
