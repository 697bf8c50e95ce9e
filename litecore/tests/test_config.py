"""
Unit tests for configuration loading and saving.
"""

import pytest
from pydantic import ValidationError

from litecore.config import (
    CONFIG_ENV,
    Config,
    ConfigError,
    DatabaseConfig,
    get_config_path,
    load_config,
    save_config,
)
from litecore.header import DEFAULT_PAGE_SIZE


class TestConfig:
    """Test configuration models and TOML round trips."""

    def test_defaults(self):
        """Default values match the built-in constants."""
        config = Config()

        assert config.repl.prompt == "LiteCore"
        assert config.repl.history_size == 1000
        assert config.database.page_size == DEFAULT_PAGE_SIZE
        assert config.monitoring.enabled is False
        assert config.logging.level == "WARNING"
        assert config.logging.log_file is None

    def test_page_size_bounds(self):
        """Page size must fit in 16 bits and be nonzero."""
        with pytest.raises(ValidationError):
            DatabaseConfig(page_size=0)
        with pytest.raises(ValidationError):
            DatabaseConfig(page_size=65536)
        assert DatabaseConfig(page_size=65535).page_size == 65535

    def test_missing_file(self, tmp_path):
        """Missing file yields defaults."""
        config = load_config(tmp_path / "nope.toml")
        assert config == Config()

    def test_save_load(self, tmp_path):
        """Saved configuration loads back unchanged."""
        path = tmp_path / "sub" / "config.toml"
        config = Config()
        config.repl.prompt = "db"
        config.database.page_size = 8192
        config.logging.log_file = str(tmp_path / "litecore.log")

        save_config(config, path)
        loaded = load_config(path)

        assert path.exists()
        assert loaded == config

    def test_partial_file(self, tmp_path):
        """Sections not present in the file keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[monitoring]\nenabled = true\n')

        config = load_config(path)

        assert config.monitoring.enabled is True
        assert config.database.page_size == DEFAULT_PAGE_SIZE

    def test_config_path_xdg(self, tmp_path, monkeypatch):
        """XDG_CONFIG_HOME decides the default location."""
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "litecore" / "config.toml"

    def test_config_path_env_override(self, tmp_path, monkeypatch):
        """LITECORE_CONFIG takes precedence over the XDG location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "custom.toml"))

        assert get_config_path() == tmp_path / "custom.toml"

    def test_default_path_used(self, tmp_path, monkeypatch):
        """Without an explicit path the environment location is read."""
        path = tmp_path / "custom.toml"
        path.write_text('[repl]\nprompt = "env"\n')
        monkeypatch.setenv(CONFIG_ENV, str(path))

        assert load_config().repl.prompt == "env"

    def test_invalid_toml(self, tmp_path):
        """Malformed TOML raises ConfigError naming the file."""
        path = tmp_path / "config.toml"
        path.write_text("[repl\nprompt = \n")

        with pytest.raises(ConfigError, match="invalid TOML") as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_invalid_value(self, tmp_path):
        """Out-of-range settings raise ConfigError, not ValidationError."""
        path = tmp_path / "config.toml"
        path.write_text("[database]\npage_size = 70000\n")

        with pytest.raises(ConfigError, match="invalid setting") as exc_info:
            load_config(path)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_save_returns_path(self, tmp_path, monkeypatch):
        """save_config writes atomically to the default location."""
        target = tmp_path / "conf" / "config.toml"
        monkeypatch.setenv(CONFIG_ENV, str(target))

        assert save_config(Config()) == target
        assert target.exists()
        assert [p.name for p in target.parent.iterdir()] == ["config.toml"]
