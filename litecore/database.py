"""
Database commands: ATTACH DATABASE.

ATTACH DATABASE <path> opens an existing data file or creates a new one with
a fresh header, then records it in the session for the prompt.
"""

import logging
import sys
from typing import List

from litecore import header
from litecore.paths import ensure_parent_dir, resolve_user_path
from litecore.registry import Command
from litecore.session import Session

logger = logging.getLogger(__name__)


def _is_usage_request(value: str) -> bool:
    return not value or value.startswith("--") or value in ("-h", "?")


def attach_database(
    session: Session, args: List[str], page_size: int = header.DEFAULT_PAGE_SIZE
) -> bool:
    """
    Attach a data file to the session.

    Args:
        session: Session to update on success.
        args: Command arguments; args[0] is the path as typed.
        page_size: Page size for newly created files.

    Returns:
        True if the file was attached.
    """
    url = args[0] if args else ""
    if _is_usage_request(url):
        print("Usage: ATTACH DATABASE <path|url>")
        print("Example: ATTACH DATABASE ./db.db")
        return False

    try:
        abs_path = resolve_user_path(url)
        ensure_parent_dir(abs_path)
        result = header.check_data_file(abs_path, page_size)
    # ValueError: paths open() rejects, e.g. embedded NUL
    except (OSError, ValueError) as e:
        logger.error(f"ATTACH DATABASE {url!r} failed: {e}")
        print(f"Failed to attach database: {e}", file=sys.stderr)
        return False

    if not result.ok:
        print(f"Failed to attach database: {result.message}", file=sys.stderr)
        return False

    session.attach(abs_path)
    logger.info(f"Attached {abs_path} ({result.status.value})")
    print(f"Attached database: {url}")
    return True


def make_attach_command(session: Session, page_size: int = header.DEFAULT_PAGE_SIZE) -> Command:
    """Create the ATTACH DATABASE command."""

    def handler(args: List[str]) -> None:
        attach_database(session, args, page_size)

    return Command(
        name="ATTACH DATABASE",
        description="Attach to a database for the current session using the provided path",
        help_text=(
            "ATTACH DATABASE <path>\n"
            "\nExamples:\n"
            "  ATTACH DATABASE ./db.db\n"
            "  help ATTACH DATABASE\n"
            "  ATTACH DATABASE --help"
        ),
        handler=handler,
    )
