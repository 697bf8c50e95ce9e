"""
Command name helpers.

Normalization for case-insensitive comparisons and help-token detection.
"""

# Leading character that marks session/system level commands (e.g. ".exit")
MARKER = "."

# Tokens that request help, compared case-insensitively
HELP_TOKENS = frozenset({"help", "--help", "-h", "?"})


def normalize_name(name: str) -> str:
    """
    Normalize a command name for comparison.

    Strips at most one leading marker character and lowercases the rest, so
    ".Exit", "exit" and "EXIT" all normalize to "exit".

    Args:
        name: Command name or user token.

    Returns:
        Normalized name.
    """
    if name.startswith(MARKER):
        name = name[len(MARKER):]
    return name.lower()


def is_help_token(token: str) -> bool:
    """Check if a token asks for help (help, --help, -h, ?)."""
    return token.lower() in HELP_TOKENS
