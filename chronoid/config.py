import json
import re
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"
_NODE_TAG = re.compile(r"^[0-9a-z]{4}$")


class IdsConfig:
    __slots__ = ("default_scheme", "node_tag")

    def __init__(self, default_scheme="aidx", node_tag=None):
        if node_tag is not None and not _NODE_TAG.fullmatch(node_tag):
            raise ValueError(f"node_tag must be 4 characters of [0-9a-z], got {node_tag!r}")
        self.default_scheme = default_scheme
        self.node_tag = node_tag


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("ids", "logging")

    def __init__(self, ids=None, logging=None):
        self.ids = ids or IdsConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            IdsConfig(**d.get("ids", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
