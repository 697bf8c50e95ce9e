"""
Configuration management for LiteCoreDB.

Loads/saves TOML configuration for the REPL, data files, monitoring and
logging.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from litecore.header import DEFAULT_PAGE_SIZE


class ReplConfig(BaseModel):
    """Interactive shell configuration."""

    prompt: str = Field(default="LiteCore", description="Prompt prefix")
    history_file: str = Field(
        default="~/.litecore_history", description="Command history file"
    )
    history_size: int = Field(default=1000, ge=0, description="History entries kept in memory")
    welcome: bool = Field(default=True, description="Print the welcome banner on startup")


class DatabaseConfig(BaseModel):
    """Data file configuration."""

    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=0xFFFF,
        description="Page size written to newly created data files",
    )


class MonitoringConfig(BaseModel):
    """Per-command metrics configuration."""

    enabled: bool = Field(default=False, description="Collect metrics on startup")
    log_file: str = Field(
        default="~/.litecore_monitoring.log", description="Metrics CSV file"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_file: Optional[str] = Field(
        default=None, description="Log file (None logs to stderr)"
    )


class Config(BaseModel):
    """Complete LiteCoreDB configuration."""

    repl: ReplConfig = Field(default_factory=ReplConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


CONFIG_ENV = "LITECORE_CONFIG"


class ConfigError(Exception):
    """Configuration file could not be parsed or failed validation."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"{path}: {reason}")


def get_config_path() -> Path:
    """
    Locate the configuration file.

    $LITECORE_CONFIG wins; otherwise litecore/config.toml under
    $XDG_CONFIG_HOME (default ~/.config).
    """
    explicit = os.getenv(CONFIG_ENV)
    if explicit:
        return Path(os.path.expanduser(explicit))
    config_home = os.getenv("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(config_home) / "litecore" / "config.toml"


def load_config(path: Optional[Path] = None) -> Config:
    """
    Read the shell configuration.

    Args:
        path: TOML file. Defaults to get_config_path().

    Returns:
        Parsed configuration; built-in defaults when the file is absent.

    Raises:
        ConfigError: If the file is not valid TOML or a value is out of range.
    """
    import tomli

    target = path if path is not None else get_config_path()
    try:
        with open(target, "rb") as f:
            data = tomli.load(f)
    except FileNotFoundError:
        return Config()
    except tomli.TOMLDecodeError as e:
        raise ConfigError(target, f"invalid TOML ({e})") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(target, f"{e.error_count()} invalid setting(s)\n{e}") from e


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """
    Write the shell configuration as TOML.

    The file is written next to its destination first and then moved into
    place, so a crash never leaves a half-written config behind.

    Args:
        config: Configuration to write.
        path: TOML file. Defaults to get_config_path().

    Returns:
        Path written.
    """
    import tomli_w

    target = path if path is not None else get_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null; unset optionals are omitted
    payload = tomli_w.dumps(config.model_dump(exclude_none=True))
    tmp = target.with_name(target.name + ".tmp")
    tmp.write_text(payload, encoding="utf-8")
    os.replace(tmp, target)
    return target
