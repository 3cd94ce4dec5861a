"""Application services."""

from __future__ import annotations

from .render_service import PromptRenderRequest, PromptRenderService

__all__ = [
    "PromptRenderRequest",
    "PromptRenderService",
]
