# src/tamlang/config.py
"""
Runtime configuration for tamlang.

Settings come from keyword arguments, a ``tamlang.json`` project file and
``TAMLANG_*`` environment variables, in increasing order of precedence.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from rich.logging import RichHandler

PROJECT_FILE = "tamlang.json"

DEFAULT_FILES = ["ornek1.tk", "ornek2.tk", "ornek3.tk", "ornek4.tk"]

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when a project file cannot be read or decoded."""


def _file_list(value) -> List[str]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"File list must be a list of paths, got {value!r}")
    return list(value)


class Config:
    """Settings shared by the runner and the CLI."""

    def __init__(self, **kwargs):
        self.enable_debug_logs: bool = kwargs.get("enable_debug_logs", False)
        self.log_level: str = kwargs.get("log_level", "WARNING")
        self.encoding: str = kwargs.get("encoding", "utf-8")
        self.default_files: List[str] = _file_list(kwargs.get("default_files", DEFAULT_FILES))

    @property
    def effective_log_level(self) -> int:
        if self.enable_debug_logs:
            return logging.DEBUG
        level = logging.getLevelName(str(self.log_level).upper())
        return level if isinstance(level, int) else logging.WARNING

    def update(self, values: Dict[str, Any]) -> "Config":
        for key in ("enable_debug_logs", "log_level", "encoding"):
            if key in values:
                setattr(self, key, values[key])
        if "default_files" in values:
            self.default_files = _file_list(values["default_files"])
        return self

    def apply_env(self, environ: Optional[Dict[str, str]] = None) -> "Config":
        environ = os.environ if environ is None else environ
        if "TAMLANG_DEBUG" in environ:
            self.enable_debug_logs = environ["TAMLANG_DEBUG"].strip().lower() in _TRUTHY
        if "TAMLANG_LOG_LEVEL" in environ:
            self.log_level = environ["TAMLANG_LOG_LEVEL"]
        if "TAMLANG_ENCODING" in environ:
            self.encoding = environ["TAMLANG_ENCODING"]
        return self

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Config":
        return cls().apply_env(environ)

    @classmethod
    def load(cls, path: str = PROJECT_FILE, environ: Optional[Dict[str, str]] = None) -> "Config":
        """Build a config from a JSON project file, then the environment.

        A missing file is not an error; a malformed one is.
        """
        cfg = cls()
        if os.path.exists(path):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigError(f"Cannot read {path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{path} must contain a JSON object")
            # "files" and "debug" are the short names used in project files
            if "files" in data:
                data.setdefault("default_files", data["files"])
            if "debug" in data:
                data.setdefault("enable_debug_logs", bool(data["debug"]))
            cfg.update(data)
        return cfg.apply_env(environ)


def configure_logging(cfg: Optional["Config"] = None) -> logging.Logger:
    """Attach a rich handler to the package logger at the configured level."""
    cfg = cfg or config
    logger = logging.getLogger("tamlang")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))
    logger.setLevel(cfg.effective_log_level)
    return logger


config = Config.from_env()
