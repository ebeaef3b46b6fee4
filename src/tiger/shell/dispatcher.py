"""CommandDispatcher — parses one input line and runs it."""

from __future__ import annotations

import os
import shlex
import sys
from collections.abc import Callable
from typing import TextIO

from loguru import logger
from rich.markup import escape

from tiger.config import ShellConfig
from tiger.process import ProcessResult, ProcessRunner
from tiger.repository import DraftCommitCoordinator, RepositoryContext, RepositoryError
from tiger.shell.models import CommandLine
from tiger.shell.output import console, report

PAGED_COMMANDS = frozenset({"log", "diff", "show"})
MESSAGE_PROMPT = "enter commit message (optional):"


def build_commit_flags(args: list[str], ask_message: Callable[[], str]) -> list[str]:
    """Build flags for ``git commit`` from the user's arguments.

    ``--allow-empty-message`` always comes first. ``-m`` swallows every token
    after it as one space-joined message, even tokens that look like flags;
    a bare trailing ``-m`` asks for the message instead.
    """
    flags = ["--allow-empty-message"]
    for n, arg in enumerate(args):
        if arg == "-m":
            rest = args[n + 1 :]
            message = " ".join(rest) if rest else ask_message()
            flags += ["-m", message]
            break
        flags.append(arg)
    return flags


class CommandDispatcher:
    """Runs enhanced commands and forwards everything else to git."""

    def __init__(
        self,
        config: ShellConfig,
        runner: ProcessRunner,
        repo: RepositoryContext,
        drafts: DraftCommitCoordinator,
        stdin: TextIO | None = None,
    ) -> None:
        self._config = config
        self._runner = runner
        self._repo = repo
        self._drafts = drafts
        self._stdin = stdin
        self._handlers: dict[str, Callable[[CommandLine], None]] = {
            "cd": self._change_directory,
            "draft": self._draft,
            "commit": self._commit,
            "ci": self._checkin,
            "checkin": self._checkin,
        }

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def git(self, *args: str) -> list[str]:
        return [self._config.git, *args]

    def dispatch(self, line: str) -> bool:
        """Run one line of input. Returns False when the session should end."""
        command = CommandLine.parse(line)
        if command.empty:
            return True
        if command.name in ("exit", "quit"):
            return False

        handler = self._handlers.get(command.name)
        if handler is not None:
            handler(command)
        elif command.name in PAGED_COMMANDS:
            self._paged(command)
        else:
            self._report_launch(self._runner.attach(self.git(*command.tokens)))
        return True

    def read_message(self) -> str:
        """Ask for a commit message on the session's input."""
        console.print(MESSAGE_PROMPT)
        return self.stdin.readline().rstrip("\r\n")

    def _report(self, result: ProcessResult) -> bool:
        return report(result.stdout, result.stderr, result.error) is None

    def _report_launch(self, result: ProcessResult) -> None:
        # attached programs print their own errors; only a failed launch needs reporting
        if result.returncode is None:
            report(error=result.error)

    def _change_directory(self, command: CommandLine) -> None:
        if not command.args:
            return
        target = " ".join(command.args)
        try:
            os.chdir(target)
        except OSError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            return
        logger.debug("cwd is now {}", os.getcwd())

    def _draft(self, command: CommandLine) -> None:
        try:
            path = self._drafts.draft_file()
            editor = self._repo.config_value("core.editor")
        except RepositoryError as exc:
            report(error=str(exc))
            return
        self._report_launch(self._runner.attach([*shlex.split(editor), str(path)]))

    def _commit(self, command: CommandLine) -> None:
        try:
            path = self._drafts.draft_file()
        except RepositoryError:
            path = None
        if path is not None and self._drafts.exists(path):
            self._report(self._drafts.commit_draft(path, command.args))
            return

        if not command.args:
            self._report(self._runner.capture_output(self.git("commit")))
            return
        flags = build_commit_flags(command.args, self.read_message)
        self._report(self._runner.capture_output(self.git("commit", *flags)))

    def _checkin(self, command: CommandLine) -> None:
        if not self._report(self._runner.capture_output(self.git("add", "."))):
            return
        message = " ".join(command.args)
        if not message:
            message = self.read_message()
        committed = self._report(
            self._runner.capture_output(self.git("commit", "--allow-empty-message", "-m", message))
        )
        if committed:
            self._report(self._runner.capture_output(self.git("push")))

    def _paged(self, command: CommandLine) -> None:
        argv = self.git(command.name, "--color", *command.args)
        try:
            pager = self._repo.config_value("core.pager")
        except RepositoryError as exc:
            logger.warning("no pager configured, running unpaged: {}", exc)
            self._report_launch(self._runner.attach(argv))
            return
        # core.pager may be any shell fragment (e.g. "diff-so-fancy | less -RFX")
        reader = [self._config.shell, "-c", f"cat - | {pager}"]
        self._report_launch(self._runner.attach_with_pipe(argv, reader))
