"""SessionLoop — wires the shell together and runs the read-eval loop."""

from __future__ import annotations

import sys
from typing import TextIO

from tiger.config import ShellConfig
from tiger.process import ProcessRunner
from tiger.repository import DraftCommitCoordinator, RepositoryContext
from tiger.shell.dispatcher import CommandDispatcher
from tiger.shell.output import console
from tiger.shell.prompt import PromptRenderer
from tiger.shell.signals import SignalHandler


class SessionLoop:
    """One interactive session: prompt, read, dispatch, repeat."""

    def __init__(
        self,
        config: ShellConfig | None = None,
        stdin: TextIO | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.config = config or ShellConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.runner = runner or ProcessRunner()
        self.repo = RepositoryContext(self.runner, git=self.config.git)
        self.drafts = DraftCommitCoordinator(
            self.repo,
            self.runner,
            git=self.config.git,
            filename=self.config.draft_filename,
            handoff_delay=self.config.template_handoff_delay,
        )
        self.prompt = PromptRenderer(self.repo, self.runner, git=self.config.git)
        self.dispatcher = CommandDispatcher(
            self.config, self.runner, self.repo, self.drafts, stdin=self.stdin
        )
        self.signals = SignalHandler()

    def run(self) -> int:
        """Run until exit, quit, or end of input. Returns the exit code."""
        self.signals.install()
        try:
            self.prompt.render()
            while True:
                try:
                    line = self.stdin.readline()
                except OSError as exc:
                    console.print(f"error reading stdin: {exc}", markup=False)
                    break
                if not line:
                    break
                if not self.dispatcher.dispatch(line):
                    break
                self.prompt.render()
        finally:
            self.signals.uninstall()
        console.print()
        return 0
