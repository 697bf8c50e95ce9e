"""
Interactive session state.

Tracks the attached data file (for the prompt) and monitoring settings.
Only commands that need it receive a reference; the router never does.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PROMPT = "LiteCore"


@dataclass
class Session:
    """
    Mutable REPL session state.

    Attributes:
        db_path: Absolute path of the attached data file.
        db_name: Attached file basename without its extension.
        monitoring_enabled: Whether per-command metrics are collected.
        monitor_log_path: Metrics CSV file.
    """

    db_path: Optional[str] = None
    db_name: Optional[str] = None
    monitoring_enabled: bool = False
    monitor_log_path: Optional[str] = None

    @property
    def attached(self) -> bool:
        """Check if a data file is attached."""
        return self.db_path is not None

    def attach(self, abs_path: str) -> None:
        """
        Record an attached data file.

        Args:
            abs_path: Absolute file path.
        """
        base = os.path.basename(abs_path)
        self.db_path = abs_path
        self.db_name = os.path.splitext(base)[0] or base

    def prompt(self, base: str = DEFAULT_PROMPT) -> str:
        """Render the prompt, including the attached database name."""
        if self.db_name:
            return f"\n{base} - {self.db_name}> "
        return f"\n{base}> "
