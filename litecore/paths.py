"""
Filesystem path helpers for user-supplied paths.
"""

import os
from pathlib import Path


def resolve_user_path(value: str) -> str:
    """
    Resolve a user-supplied path to an absolute path.

    Expands a leading "~" to the home directory and resolves "." and ".."
    against the current working directory.

    Args:
        value: Path as typed by the user.

    Returns:
        Absolute path.
    """
    return os.path.abspath(os.path.expanduser(value or ""))


def ensure_parent_dir(file_path: str) -> None:
    """Create the parent directory of file_path if needed (mkdir -p)."""
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
