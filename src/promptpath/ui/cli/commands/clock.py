"""Time command implementation for the CLI."""

from __future__ import annotations

from typing import TextIO, final

from promptpath.application.services import PromptRenderRequest, PromptRenderService
from promptpath.features.segment import TimestampSource
from promptpath.ui.cli.args.options import TimeArgs
from promptpath.ui.cli.commands.output import create_sink


@final
class TimeCommand:
    """Command that renders the local time as one prompt line."""

    def __init__(self, args: TimeArgs, stream: TextIO | None = None) -> None:
        self.args = args
        self.service = PromptRenderService()
        self.sink = create_sink(args.color, stream)

    def execute(self) -> int:
        """Execute the time command."""

        request = PromptRenderRequest(
            source=TimestampSource(self.args.time_format),
            style=self.args.style,
        )
        written = self.service.render(request, self.sink)
        _ = self.sink.write("\n")
        self.sink.flush()
        return written
