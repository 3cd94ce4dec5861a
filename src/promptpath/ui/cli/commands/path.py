"""Path command implementation for the CLI."""

from __future__ import annotations

from typing import TextIO, final

from promptpath.application.services import PromptRenderRequest, PromptRenderService
from promptpath.ui.cli.args.options import PathArgs
from promptpath.ui.cli.commands.output import create_sink


@final
class PathCommand:
    """Command that renders a path as one prompt line."""

    def __init__(self, args: PathArgs, stream: TextIO | None = None) -> None:
        self.args = args
        self.service = PromptRenderService()
        self.sink = create_sink(args.color, stream)

    def execute(self) -> int:
        """Execute the path command.

        Returns:
            int: Number of elements written.
        """

        request = PromptRenderRequest.for_path(
            self.args.path,
            show_home=self.args.show_home,
            home=self.args.home,
            policy=self.args.policy,
            style=self.args.style,
        )
        written = self.service.render(request, self.sink)
        _ = self.sink.write("\n")
        self.sink.flush()
        return written
