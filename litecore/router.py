"""
Command router for the LiteCoreDB shell.

Resolves one line of input to a single outcome: nothing (blank line), global
help, per-command help, command execution, or an unknown-command report with
a suggestion.

Matching rules:
    - Help requests start with help, --help, -h or ? (any case).
    - Commands match on their canonical name at the start of the line,
      case-insensitively, ending at a token boundary. The longest matching
      name wins, so "ATTACH DATABASE" beats a hypothetical "ATTACH".
    - Marker-prefixed names must be typed with the marker: "exit" does not
      match ".exit", but the suggestion engine will offer it.
"""

import logging
import sys
from typing import List, Optional, Tuple

from litecore.distance import levenshtein
from litecore.names import is_help_token, normalize_name
from litecore.registry import Command, CommandRegistry

logger = logging.getLogger(__name__)

# Largest edit distance still worth suggesting
SUGGESTION_THRESHOLD = 3
# Shortest input considered for multi-word prefix suggestions
MIN_PREFIX_LEN = 3

CATEGORY_SUFFIX = " commands:"


class Router:
    """
    Dispatch engine for shell input.

    The router holds no session state; commands that need it receive it when
    the registry is built.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        """
        Initialize router.

        Args:
            registry: Commands available for dispatch.
        """
        self.registry = registry

    def command(self, line: str) -> None:
        """
        Route a single line of user input.

        Args:
            line: Raw input line.
        """
        raw = line.strip()
        if not raw:
            return

        tokens = raw.split()
        first, rest = tokens[0], tokens[1:]

        if is_help_token(first):
            self._handle_help(rest)
            return

        resolved = self.resolve(raw)
        if resolved is None:
            logger.debug(f"No command matches {raw!r}")
            print(f"Unknown command: {first}")
            self.suggest(first)
            return

        cmd, args = resolved

        if any(is_help_token(arg) for arg in args):
            cmd.help()
            return

        logger.debug(f"Dispatching {cmd.name!r} args={args}")
        try:
            cmd.execute(args)
        except Exception as e:
            logger.debug(f"Command {cmd.name!r} failed", exc_info=True)
            print(f"Command failed: {e}", file=sys.stderr)

    def resolve(self, line: str) -> Optional[Tuple[Command, List[str]]]:
        """
        Find the command named at the start of a line.

        Args:
            line: Input line (leading/trailing whitespace ignored).

        Returns:
            (command, args) for the longest matching name, or None.
        """
        raw = line.strip()
        lowered = raw.lower()

        best: Optional[Command] = None
        best_len = 0
        for cmd in self.registry.commands:
            name = cmd.name.lower()
            if not name or not lowered.startswith(name):
                continue
            # Match must end on a token boundary
            if len(raw) > len(name) and not raw[len(name)].isspace():
                continue
            if len(name) > best_len:
                best, best_len = cmd, len(name)

        if best is None:
            return None

        remainder = raw[best_len:].strip()
        args = remainder.split() if remainder else []
        return best, args

    def suggest(self, token: str) -> None:
        """
        Print at most one suggestion for an unknown token.

        Args:
            token: Unmatched user input (usually the first word).
        """
        needle = normalize_name(token)
        commands = self.registry.commands

        if commands:
            # min() keeps the first of equal scores, i.e. registry order
            best = min(commands, key=lambda c: levenshtein(needle, normalize_name(c.name)))
            score = levenshtein(needle, normalize_name(best.name))
            if score <= SUGGESTION_THRESHOLD:
                print(f"Did you mean: {best.name} ?")
                return

        if len(needle) >= MIN_PREFIX_LEN:
            prefix = needle + " "
            for cmd in commands:
                if normalize_name(cmd.name).startswith(prefix):
                    print(f"Did you mean: {cmd.name} ?")
                    return

        print('Type "help" to see available commands.')

    def print_help(self) -> None:
        """Print the global help listing, grouped by category."""
        print("Available commands:")
        for label, commands in self.registry.grouped():
            print(f"{label}{CATEGORY_SUFFIX}")
            for cmd in commands:
                print(f"  {cmd.name} - {cmd.description}")
        print("Tips:")
        print('  Type "help <command>" or "<command> --help" to learn more.')
        print(
            '  Command matching is case-insensitive. '
            'Some commands require a leading "." (e.g., .exit).'
        )

    def _handle_help(self, rest: List[str]) -> None:
        if not rest:
            self.print_help()
            return

        target = " ".join(rest)
        cmd = self.registry.find(target)
        if cmd is not None:
            cmd.help()
            return

        print(f"Unknown command for help: {target}")
        self.suggest(rest[0])
