"""
Filesystem Helpers
==================
"""

import os


def file_exists(path: str) -> bool:
    """Check whether path can be stat'ed (files and directories)."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True
