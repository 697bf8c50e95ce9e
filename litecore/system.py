"""
System commands: .exit, .clear, .monitoring.
"""

import sys
from typing import List

from litecore import monitoring
from litecore.registry import Command
from litecore.session import Session

CLEAR_SCREEN = "\033[2J\033[H"


def make_exit_command(session: Session) -> Command:
    """Create the .exit command."""

    def handler(args: List[str]) -> None:
        try:
            if session.monitoring_enabled:
                print(f"Monitoring log: {monitoring.get_monitoring_file_path(session)}")
        finally:
            sys.exit(0)

    return Command(
        name=".exit",
        description="Exit the current REPL session",
        help_text=(
            "Exit the current REPL session\n"
            "\nExamples:\n"
            "  .exit\n"
            "  help .exit\n"
            "  .exit --help"
        ),
        handler=handler,
    )


def make_clear_command() -> Command:
    """Create the .clear command."""

    def handler(args: List[str]) -> None:
        sys.stdout.write(CLEAR_SCREEN)
        sys.stdout.flush()

    return Command(
        name=".clear",
        description="Clear the console",
        help_text=(
            "Clear the console\n"
            "\nExamples:\n"
            "  .clear\n"
            "  help .clear\n"
            "  .clear --help"
        ),
        handler=handler,
    )


def make_monitoring_command(session: Session) -> Command:
    """Create the .monitoring command."""

    def handler(args: List[str]) -> None:
        token = args[0].lower() if args else ""

        if token in ("true", "on", "enable"):
            path = monitoring.enable_monitoring(session)
            print(f"Monitoring enabled. Logging to: {path}")
            return
        if token in ("false", "off", "disable"):
            path = monitoring.get_monitoring_file_path(session)
            monitoring.disable_monitoring(session)
            print(f"Monitoring disabled. Log file: {path}")
            return

        # status (default)
        print(f"Monitoring: {'ON' if session.monitoring_enabled else 'OFF'}")
        print(f"Log file: {monitoring.get_monitoring_file_path(session)}")

    return Command(
        name=".monitoring",
        description="Enable/disable metrics collection and show status",
        help_text=(
            "Toggle metrics collection for each command. When enabled,\n"
            "LiteCoreDB prints execution time after each command and appends\n"
            "metrics to a CSV log file.\n"
            "\nUsage:\n"
            "  .monitoring\n"
            "  .monitoring status\n"
            "  .monitoring true\n"
            "  .monitoring false"
        ),
        handler=handler,
    )
