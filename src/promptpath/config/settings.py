"""Where: src/promptpath/config/settings.py
What: Runtime settings sourced from ``PROMPTPATH_*`` environment variables.
Why: Let shell rc files tune the prompt without a configuration file.
Assumptions: - Defaults reproduce the reference composition (" / ", 5 elements, blue on color 19).
Trade-offs: - Validation happens once at load time; domain objects re-validate on construction.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

from promptpath.config.paths import resolve_log_file
from promptpath.features.render.domain.policy import (
    DEFAULT_ELLIPSIS,
    DEFAULT_MAX_ELEMS,
    DEFAULT_SEPARATOR,
    JoinerPolicy,
)
from promptpath.features.render.domain.style import InvalidStyleError, StyleDescriptor, parse_color
from promptpath.features.segment.domain.timestamp_source import DEFAULT_TIME_FORMAT

ENV_PREFIX: Final[str] = "PROMPTPATH_"
DEFAULT_FOREGROUND: Final[str] = "blue"
DEFAULT_BACKGROUND: Final[str] = "color(19)"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})
_UNBOUNDED_VALUES: Final[frozenset[str]] = frozenset({"unbounded", "none", "all"})


class SettingsError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r}: {reason}")
        self.name: str = name
        self.value: str = value


def parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise SettingsError(name, value, "expected one of 1/0, true/false, yes/no, on/off")


def parse_max_elems(name: str, value: str) -> int | None:
    """Parse an element bound; ``unbounded``, ``none`` and ``all`` disable it."""
    normalized = value.strip().lower()
    if normalized in _UNBOUNDED_VALUES:
        return None
    try:
        parsed = int(normalized)
    except ValueError as exc:
        raise SettingsError(name, value, "expected a non-negative integer or 'unbounded'") from exc
    if parsed < 0:
        raise SettingsError(name, value, "must not be negative")
    return parsed


@dataclass(slots=True, frozen=True)
class Settings:
    """Prompt rendering settings."""

    separator: str = DEFAULT_SEPARATOR
    max_elems: int | None = DEFAULT_MAX_ELEMS
    ellipsis: str = DEFAULT_ELLIPSIS
    show_home: bool = True
    foreground: str | None = DEFAULT_FOREGROUND
    background: str | None = DEFAULT_BACKGROUND
    time_format: str = DEFAULT_TIME_FORMAT
    log_file: Path | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Load settings from the environment, keeping defaults for unset variables.

        Args:
            env: Mapping to read instead of ``os.environ``.

        Returns:
            Settings: Loaded settings.

        Raises:
            SettingsError: If a variable holds an invalid value.
        """
        mapping = env if env is not None else os.environ
        values: dict[str, Any] = {}

        def _get(key: str) -> tuple[str, str | None]:
            name = f"{ENV_PREFIX}{key}"
            return name, mapping.get(name)

        # Separators and markers are used verbatim, whitespace included.
        for key, field_name in (("SEPARATOR", "separator"), ("ELLIPSIS", "ellipsis")):
            _, raw = _get(key)
            if raw:
                values[field_name] = raw

        name, raw = _get("MAX_ELEMS")
        if raw is not None and raw.strip():
            values["max_elems"] = parse_max_elems(name, raw)

        name, raw = _get("SHOW_HOME")
        if raw is not None and raw.strip():
            values["show_home"] = parse_bool(name, raw)

        # An empty color variable means "no color" for that side.
        for key, field_name in (("FG", "foreground"), ("BG", "background")):
            name, raw = _get(key)
            if raw is None:
                continue
            try:
                _ = parse_color(raw)
            except InvalidStyleError as exc:
                raise SettingsError(name, raw, str(exc)) from exc
            values[field_name] = raw.strip() or None

        _, raw = _get("TIME_FORMAT")
        if raw:
            values["time_format"] = raw

        values["log_file"] = resolve_log_file(env=mapping)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})

    def policy(self) -> JoinerPolicy:
        """Build the joiner policy.

        Raises:
            InvalidJoinerPolicyError: If ``max_elems`` is negative.
        """
        return JoinerPolicy(
            separator=self.separator,
            max_elems=self.max_elems,
            ellipsis=self.ellipsis,
        )

    def style(self) -> StyleDescriptor:
        """Build the style descriptor.

        Raises:
            InvalidStyleError: If a color cannot be parsed.
        """
        return StyleDescriptor.from_colors(self.foreground, self.background)


__all__ = [
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "ENV_PREFIX",
    "Settings",
    "SettingsError",
    "parse_bool",
    "parse_max_elems",
]
