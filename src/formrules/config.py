"""Server and logging configuration: JSON file with environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 41780
DEFAULT_LOG_LEVEL = "WARNING"
CONFIG_FILE_NAME = ".formrules.json"


def _safe_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(path: Path | None = None) -> Config:
    """Load the ``formrules`` section of a JSON config file, then apply env vars."""
    if path is None:
        path = Path.cwd() / CONFIG_FILE_NAME
    config = Config()

    if path.exists():
        try:
            text = path.read_text()
            if text.strip():
                data = json.loads(text)
                section = data.get("formrules", {}) if isinstance(data, dict) else {}
                if isinstance(section, dict):
                    _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")

    if host := os.environ.get("FORMRULES_HOST"):
        config.host = host
    if port := os.environ.get("FORMRULES_PORT"):
        config.port = _safe_int(port, config.port)
    if level := os.environ.get("FORMRULES_LOG_LEVEL"):
        config.log_level = level.upper()
    return config


def _apply(cfg: Config, data: dict[str, object]) -> None:
    if isinstance(data.get("host"), str):
        cfg.host = data["host"]  # type: ignore[assignment]
    port = data.get("port")
    if isinstance(port, int) and not isinstance(port, bool):
        cfg.port = port
    if isinstance(data.get("log_level"), str):
        cfg.log_level = str(data["log_level"]).upper()
