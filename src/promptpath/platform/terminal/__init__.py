"""Terminal adapters implementing the render sink ports."""

from __future__ import annotations

from .ansi_sink import RESET_SEQUENCE, AnsiStyleSink, sgr_sequence

__all__ = ["RESET_SEQUENCE", "AnsiStyleSink", "sgr_sequence"]
