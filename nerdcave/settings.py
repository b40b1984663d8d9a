"""Adapter configuration: .env, an optional YAML file, then environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import yaml
from dotenv import load_dotenv

from nerdcave.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_STYLES = {
    "plain": "",
    "success": "green",
    "error": "bold red",
    "info": "cyan",
    "user-echo": "dim",
}


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_dir: str = "logs"
    styles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))


def _read_yaml(path: str) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}.")
    return data


def load_settings(path: Optional[str] = None, dotenv_path: Optional[str] = None) -> Settings:
    """Build Settings from defaults, the YAML config file and the environment.

    ``path`` wins over ``NERDCAVE_CONFIG``. A path given either way must exist.
    """
    load_dotenv(dotenv_path)
    settings = Settings()

    path = path or os.environ.get("NERDCAVE_CONFIG")
    if path:
        data = _read_yaml(path)
        logger.debug("Loaded config from %s", path)
        if "log_level" in data:
            settings.log_level = str(data["log_level"]).upper()
        if "log_dir" in data:
            settings.log_dir = str(data["log_dir"])
        styles = data.get("styles") or {}
        if not isinstance(styles, dict):
            raise ConfigError(f"'styles' in {path} must be a mapping of style name to rich style.")
        settings.styles.update({str(k): str(v) for k, v in styles.items()})

    if os.environ.get("NERDCAVE_LOG_LEVEL"):
        settings.log_level = os.environ["NERDCAVE_LOG_LEVEL"].upper()
    if os.environ.get("NERDCAVE_LOG_DIR"):
        settings.log_dir = os.environ["NERDCAVE_LOG_DIR"]

    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ConfigError(f"Unknown log level: {settings.log_level}")
    return settings
