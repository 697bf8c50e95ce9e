"""
Built-in command set for the LiteCoreDB shell.

Builds the registry consumed by the Router at startup.
"""

from typing import Optional

from litecore.config import Config
from litecore.database import make_attach_command
from litecore.registry import CommandRegistry
from litecore.session import Session
from litecore.system import make_clear_command, make_exit_command, make_monitoring_command

SYSTEM = "System"
DATABASE = "Database"


def build_registry(session: Session, config: Optional[Config] = None) -> CommandRegistry:
    """
    Build the default command registry.

    Args:
        session: Session shared by commands that update it.
        config: Configuration (defaults if None).

    Returns:
        Registry with System commands first, then Database commands.
    """
    if config is None:
        config = Config()

    registry = CommandRegistry()
    registry.add(SYSTEM, make_exit_command(session))
    registry.add(SYSTEM, make_clear_command())
    registry.add(SYSTEM, make_monitoring_command(session))
    registry.add(DATABASE, make_attach_command(session, config.database.page_size))
    return registry
