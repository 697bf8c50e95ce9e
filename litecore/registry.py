"""
Command registry for the LiteCoreDB shell.

Commands are plain descriptors grouped into display categories. Category
membership only affects the global help listing, never matching.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from litecore.names import normalize_name


@dataclass
class Command:
    """
    Shell command descriptor.

    Attributes:
        name: Canonical name. May contain spaces ("ATTACH DATABASE") or a
            leading marker (".exit").
        description: One-line summary for the global help listing.
        help_text: Detailed usage printed by help().
        handler: Called with the argument list by execute().
    """

    name: str
    description: str
    help_text: str
    handler: Callable[[List[str]], None]

    def help(self) -> None:
        """Print usage details."""
        print(self.help_text)

    def execute(self, args: List[str]) -> None:
        """Run the command with the given arguments."""
        self.handler(args)


@dataclass
class Category:
    """Named group of commands, in insertion order."""

    label: str
    commands: List[Command] = field(default_factory=list)


class CommandRegistry:
    """
    Ordered collection of commands partitioned into categories.

    Iteration order is category order, then insertion order within a
    category. Duplicate normalized names are not rejected; lookups return the
    first registered match.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.categories: List[Category] = []

    def add(self, label: str, command: Command) -> Command:
        """
        Register a command under a category.

        Args:
            label: Category label (e.g. "System"). Created at the end of the
                category list if it does not exist yet.
            command: Command to add.

        Returns:
            The command, so registration can be chained.
        """
        for category in self.categories:
            if category.label == label:
                category.commands.append(command)
                return command

        self.categories.append(Category(label, [command]))
        return command

    @property
    def commands(self) -> List[Command]:
        """All commands in registry order."""
        return [cmd for category in self.categories for cmd in category.commands]

    def grouped(self) -> List[Tuple[str, List[Command]]]:
        """Categories as (label, commands) pairs for help listings."""
        return [(category.label, list(category.commands)) for category in self.categories]

    def find(self, name: str) -> Optional[Command]:
        """
        Find command by normalized name.

        Args:
            name: Command name in any case, with or without the marker.

        Returns:
            First matching command, or None.
        """
        wanted = normalize_name(name)
        for cmd in self.commands:
            if normalize_name(cmd.name) == wanted:
                return cmd
        return None

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return sum(len(category.commands) for category in self.categories)
