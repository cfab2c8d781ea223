"""Configuration loading: TOML file + environment variable overlay."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]


DEFAULT_CONFIG_DIR = Path.home() / ".config" / "typedrpc"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"


DEFAULT_CONFIG_TOML = """\
[client]
validate = false

[logging]
level = "WARNING"

# One table per method, e.g.:
# [methods.removeData]
# params = "array"      # object, array, any, none
# result = "object"
# required = []         # keys an object payload must carry
"""

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    validate: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"

    @property
    def resolved_level(self) -> int:
        level = logging.getLevelName(self.level.upper())
        return level if isinstance(level, int) else logging.WARNING


@dataclass
class AppConfig:
    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    methods: dict[str, dict] = field(default_factory=dict)
    config_path: Path = DEFAULT_CONFIG_PATH


def _env_overlay(config: AppConfig) -> None:
    """Override config values with environment variables where applicable."""
    if (validate := os.environ.get("TYPEDRPC_VALIDATE")) is not None:
        config.client.validate = validate.strip().lower() in _TRUE_VALUES
    if level := os.environ.get("TYPEDRPC_LOG_LEVEL"):
        config.logging.level = level


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file with env var overlay."""
    path = config_path or DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    else:
        raw = tomllib.loads(DEFAULT_CONFIG_TOML)

    client_raw = raw.get("client", {})
    logging_raw = raw.get("logging", {})
    methods_raw = raw.get("methods", {})

    config = AppConfig(
        client=ClientConfig(
            validate=client_raw.get("validate", False),
        ),
        logging=LoggingConfig(
            level=logging_raw.get("level", "WARNING"),
        ),
        methods={name: dict(data) for name, data in methods_raw.items()},
        config_path=path,
    )

    _env_overlay(config)
    return config


def init_config(config_path: Path | None = None) -> Path:
    """Create default config file."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML)
    return path
