"""Terminal output helpers — the ANSI palette and the trim-and-print reporter."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
GREY = "\033[37m"
RESET = "\033[0m"

console = Console(highlight=False, emoji=False, soft_wrap=True)


def report(stdout: str = "", stderr: str = "", error: str | None = None) -> str | None:
    """Print an error line, then trimmed stdout and stderr. Returns ``error`` unchanged."""
    if error is not None:
        console.print(f"[red]ERROR:[/red] {escape(error)}")
    stdout = stdout.strip()
    if stdout:
        console.print(escape(stdout))
    stderr = stderr.strip()
    if stderr:
        console.print(escape(stderr))
    return error
