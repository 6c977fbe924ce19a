"""anchorpath centralized configuration for runtime settings.

All settings are backed by environment variables following the AP_* naming convention.
No side effects on import beyond reading the environment.

Example:
    >>> from anchorpath.config import settings
    >>> settings.path_flavor
    'auto'
    >>> settings.log_console
    False

Environment Variables:
    AP_PATH_FLAVOR: Path rules to apply: auto, posix or windows (default: auto)
    AP_LOG_DIR: Directory for JSON-lines log files (default: unset, no file output)
    AP_LOG_CONSOLE: Echo log lines to stdout (default: false)
    AP_LOG_LEVEL: Minimum level written: debug, info, warning, error, critical (default: warning)
    AP_LOG_MAX_SIZE_MB: Log file size in MB before rotation (default: unset, no rotation)
    AP_LOG_MAX_FILES: Number of rotated log files to keep (default: 5)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_FLAVORS = ("auto", "posix", "windows")
_LEVELS = ("debug", "info", "warning", "error", "critical")


def _env(name: str, default: str) -> str:
    """Get environment variable with AP_* prefix validation."""
    if not name.startswith("AP_"):
        raise ValueError(f"Only AP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Get environment variable as integer."""
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_optional_int(name: str) -> Optional[int]:
    raw = _env(name, "")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Get environment variable restricted to ``choices`` (case-insensitive)."""
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for anchorpath.

    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, set environment variables and reload this module,
    or use monkeypatch to replace the module-level `settings` instance.
    """

    # Platform rules used when a path is constructed without an explicit flavor
    path_flavor: str = _env_choice("AP_PATH_FLAVOR", "auto", _FLAVORS)

    # Logging
    log_dir: Optional[str] = _env("AP_LOG_DIR", "") or None
    log_console: bool = _env_bool("AP_LOG_CONSOLE", False)
    log_level: str = _env_choice("AP_LOG_LEVEL", "warning", _LEVELS)
    log_max_size_mb: Optional[int] = _env_optional_int("AP_LOG_MAX_SIZE_MB")
    log_max_files: int = _env_int("AP_LOG_MAX_FILES", 5)


# Module-level instance for convenient access
settings = Settings()

__all__ = [
    "settings",
    "Settings",
]
