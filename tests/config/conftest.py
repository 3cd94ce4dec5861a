"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[dict[str, str]]:
    """Provide an empty environment mapping and strip real PROMPTPATH_* variables."""

    for name in list(os.environ):
        if name.startswith("PROMPTPATH_"):
            monkeypatch.delenv(name)
    yield {}
