"""
REPL command history.

History is stored one entry per line, oldest first, in a plain text file
(default ~/.litecore_history).
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_PATH = "~/.litecore_history"
DEFAULT_HISTORY_SIZE = 1000


def load_history(path: str = DEFAULT_HISTORY_PATH, max_entries: int = DEFAULT_HISTORY_SIZE) -> List[str]:
    """
    Load history entries from disk.

    Args:
        path: History file path ("~" is expanded).
        max_entries: Maximum number of entries to keep.

    Returns:
        Non-empty entries, oldest first. Empty if the file is missing or
        unreadable.
    """
    path = os.path.expanduser(path)
    if max_entries <= 0 or not os.path.exists(path):
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read history {path}: {e}")
        return []

    entries = [line for line in lines if line]
    return entries[-max_entries:]


def should_record(line: str) -> bool:
    """
    Check if an input line belongs in history.

    Like bash with ignorespace: blank lines and lines starting with
    whitespace are skipped.
    """
    if not line.strip():
        return False
    return not line[0].isspace()


def append_history(path: str, line: str) -> bool:
    """
    Append an input line to the history file.

    Args:
        path: History file path ("~" is expanded).
        line: Raw input line as typed.

    Returns:
        True if the line was written.
    """
    if not should_record(line):
        return False

    path = os.path.expanduser(path)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(line.strip() + "\n")
    except OSError as e:
        logger.warning(f"Cannot write history {path}: {e}")
        return False
    return True
