import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class IdsConfig:
    __slots__ = ("default_prefix",)

    def __init__(self, default_prefix=""):
        self.default_prefix = default_prefix


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("ids", "server", "logging")

    def __init__(self, ids=None, server=None, logging=None):
        self.ids = ids or IdsConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            IdsConfig(**d.get("ids", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
