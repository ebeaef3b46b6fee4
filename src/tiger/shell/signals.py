"""SignalHandler — Ctrl+C ends the session immediately."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Any


class SignalHandler:
    """Installs a SIGINT handler that prints a newline and exits with status 0.

    Exit is immediate: in-flight subprocesses are abandoned and no cleanup runs.
    """

    def __init__(self) -> None:
        self._previous: Any = None
        self._installed = False

    def install(self) -> None:
        self._previous = signal.signal(signal.SIGINT, self.handle)
        self._installed = True

    def uninstall(self) -> None:
        if self._installed:
            signal.signal(signal.SIGINT, self._previous)
            self._installed = False

    def handle(self, signum: int, frame: FrameType | None) -> None:
        sys.stdout.write("\n")
        sys.stdout.flush()
        os._exit(0)
