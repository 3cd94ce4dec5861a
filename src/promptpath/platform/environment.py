"""Process environment lookups (home and working directory).

Where: platform/environment.py
What: Resolve the inputs that the segment domain receives explicitly.
Why: Keep ambient process state out of the domain so it stays testable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve_home() -> Path | None:
    """Return the current user's home directory, or ``None`` if unknown."""

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        logger.debug("Home directory could not be resolved: %s", exc)
        return None

    if not home.is_absolute():
        logger.debug("Ignoring non-absolute home directory: %s", home)
        return None
    return home


def current_directory(env: Mapping[str, str] | None = None) -> Path:
    """Return the working directory, falling back to ``$PWD`` if it was removed.

    Raises:
        FileNotFoundError: If the directory is gone and ``$PWD`` is unset.
    """

    try:
        return Path.cwd()
    except FileNotFoundError:
        mapping = env if env is not None else os.environ
        pwd = (mapping.get("PWD") or "").strip()
        if not pwd:
            raise
        logger.debug("Working directory no longer exists; using PWD=%s", pwd)
        return Path(pwd)


__all__ = ["current_directory", "resolve_home"]
