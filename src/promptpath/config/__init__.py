"""Configuration: environment-backed settings and path resolution."""

from __future__ import annotations

from .paths import ENV_LOG_FILE, resolve_log_file, resolve_overridable_path
from .settings import Settings, SettingsError

__all__ = [
    "ENV_LOG_FILE",
    "Settings",
    "SettingsError",
    "resolve_log_file",
    "resolve_overridable_path",
]
