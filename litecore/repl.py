"""
LiteCoreDB REPL entry point.

Reads one line at a time, hands it to the Router, and keeps history,
prompt and monitoring up to date between lines.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from litecore import __version__, history, monitoring
from litecore.commands import build_registry
from litecore.config import Config, ConfigError, LoggingConfig, load_config
from litecore.router import Router
from litecore.session import Session

try:
    import readline
except ImportError:  # Windows
    readline = None

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class Repl:
    """
    Interactive read-eval-print loop.

    Owns the session and wires it into the command registry; the router
    itself stays session-free.
    """

    def __init__(self, config: Optional[Config] = None, record_history: bool = True) -> None:
        """
        Initialize REPL.

        Args:
            config: Configuration (defaults if None).
            record_history: Load and append the history file.
        """
        self.config = config or Config()
        self.record_history = record_history
        self.session = Session(
            monitoring_enabled=self.config.monitoring.enabled,
            monitor_log_path=self.config.monitoring.log_file,
        )
        self.router = Router(build_registry(self.session, self.config))

    @property
    def history_path(self) -> str:
        return os.path.expanduser(self.config.repl.history_file)

    def print_welcome(self) -> None:
        """Print the startup banner."""
        print(f"LiteCoreDB v{__version__}")
        print('Type "help" for help. Use .exit to quit, .clear to clear the screen.')

    def load_history(self) -> None:
        """Feed saved history into readline."""
        if not self.record_history or readline is None:
            return
        readline.set_history_length(self.config.repl.history_size)
        for entry in history.load_history(self.history_path, self.config.repl.history_size):
            readline.add_history(entry)

    def handle(self, line: str) -> None:
        """
        Process one input line.

        Args:
            line: Raw line as typed.
        """
        if self.record_history:
            history.append_history(self.history_path, line)
        monitoring.measure(self.session, line, self.router.command)

    def run(self) -> int:
        """
        Run the loop until EOF or .exit.

        Returns:
            Process exit code.
        """
        if self.config.repl.welcome:
            self.print_welcome()
        self.load_history()

        while True:
            try:
                line = input(self.session.prompt(self.config.repl.prompt))
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                # Discard the current line
                print()
                continue
            self.handle(line)

        return 0


def setup_logging(config: LoggingConfig, level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        config: Logging configuration.
        level: Level override (e.g. from --log-level).
    """
    handlers: List[logging.Handler]
    if config.log_file:
        log_path = Path(os.path.expanduser(config.log_file))
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(log_path)]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]

    logging.basicConfig(
        level=getattr(logging, (level or config.level).upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the litecore command."""
    parser = argparse.ArgumentParser(description="LiteCoreDB interactive shell")
    parser.add_argument("--config", type=Path, default=None, help="Configuration file (TOML)")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Run a command line and exit (repeatable)",
    )
    parser.add_argument("--no-history", action="store_true", help="Do not read or write history")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging, args.log_level)
    logger.info(f"LiteCoreDB {__version__} starting")

    repl = Repl(config, record_history=not args.no_history and not args.command)

    if args.command:
        for line in args.command:
            repl.handle(line)
        return 0

    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
