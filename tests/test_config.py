"""Unit tests for configuration loading."""

import json

import pytest
from pksuid.config import (
    Config,
    IdsConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestIdsConfig:
    """Tests for IdsConfig class."""

    def test_default_values(self):
        """IdsConfig has no default prefix."""
        config = IdsConfig()
        assert config.default_prefix == ""

    def test_custom_values(self):
        """IdsConfig accepts a default prefix."""
        config = IdsConfig(default_prefix="key_live:")
        assert config.default_prefix == "key_live:"


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        assert LoggingConfig().level == "INFO"

    def test_custom_values(self):
        """LoggingConfig accepts custom values."""
        assert LoggingConfig(level="DEBUG").level == "DEBUG"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.ids, IdsConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "ids": {"default_prefix": "usr_"},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.ids.default_prefix == "usr_"
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"ids": {"default_prefix": "x_"}})
        assert config.ids.default_prefix == "x_"
        assert config.server.port == 8080  # Default

    def test_from_dict_unknown_key(self):
        """Unknown keys are rejected."""
        with pytest.raises(TypeError):
            Config.from_dict({"ids": {"separator": ":"}})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        config = load_config()
        assert isinstance(config, Config)

    def test_load_config_reads_file(self):
        """load_config reads the bundled config.json."""
        config = load_config()
        assert config.ids.default_prefix == "id_"
        assert config.server.port == 8080

    def test_load_config_custom_path(self, tmp_path):
        """load_config reads a given file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "WARN"}}))
        assert load_config(path).logging.level == "WARN"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.ids.default_prefix == ""  # Default
