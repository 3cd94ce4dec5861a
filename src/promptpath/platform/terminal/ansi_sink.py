"""ANSI terminal sink backed by rich color handling.

Where: platform/terminal/ansi_sink.py
What: Implement the StyleSink port by emitting SGR sequences around plain writes.
Why: Reuse rich's color parsing, downgrading and terminal detection instead of hand-built tables.
"""

from __future__ import annotations

from typing import Final, TextIO, final

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console

from promptpath.features.render.domain.style import StyleDescriptor

CSI: Final[str] = "\x1b["
RESET_SEQUENCE: Final[str] = f"{CSI}0m"


def sgr_sequence(style: StyleDescriptor, color_system: ColorSystem) -> str:
    """Return the SGR escape selecting ``style`` on ``color_system``.

    An empty string is returned for a style without colors.
    """

    codes: list[str] = []
    if style.foreground is not None:
        codes.extend(style.foreground.downgrade(color_system).get_ansi_codes(foreground=True))
    if style.background is not None:
        codes.extend(style.background.downgrade(color_system).get_ansi_codes(foreground=False))
    if not codes:
        return ""
    return f"{CSI}{';'.join(codes)}m"


@final
class AnsiStyleSink:
    """Write text to a stream, switching colors with ANSI escape sequences.

    With ``color_system=None`` style changes are ignored and only text is
    written, which is what rich does for non-terminals and ``NO_COLOR``.
    """

    def __init__(self, stream: TextIO, color_system: ColorSystem | None = ColorSystem.TRUECOLOR) -> None:
        self._stream: TextIO = stream
        self._color_system: ColorSystem | None = color_system
        self._styled: bool = False

    @classmethod
    def from_console(cls, console: Console) -> AnsiStyleSink:
        """Build a sink sharing the console's stream and detected color system.

        ``NO_COLOR`` (``console.no_color``) disables styling altogether.
        """

        name = console.color_system
        if name is None or console.no_color:
            return cls(console.file, None)
        color_system = COLOR_SYSTEMS[name]
        return cls(console.file, color_system)

    @property
    def color_system(self) -> ColorSystem | None:
        return self._color_system

    @property
    def styled(self) -> bool:
        """Whether a style was applied and not yet reset."""
        return self._styled

    def write(self, text: str, /) -> int:
        return self._stream.write(text)

    def set_style(self, style: StyleDescriptor) -> None:
        if self._color_system is None:
            return
        sequence = sgr_sequence(style, self._color_system)
        if sequence:
            _ = self._stream.write(sequence)
            self._styled = True

    def reset(self) -> None:
        if self._color_system is None:
            return
        _ = self._stream.write(RESET_SEQUENCE)
        self._styled = False

    def flush(self) -> None:
        self._stream.flush()
