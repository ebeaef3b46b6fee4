"""Tiger interactive shell — prompt, dispatch, and session loop."""

from __future__ import annotations

from tiger.shell.dispatcher import CommandDispatcher, build_commit_flags
from tiger.shell.models import CommandLine
from tiger.shell.output import report
from tiger.shell.prompt import PromptRenderer, normalize_path_separators
from tiger.shell.session import SessionLoop
from tiger.shell.signals import SignalHandler

__all__ = [
    "CommandDispatcher",
    "CommandLine",
    "PromptRenderer",
    "SessionLoop",
    "SignalHandler",
    "build_commit_flags",
    "normalize_path_separators",
    "report",
]
