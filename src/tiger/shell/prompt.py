"""PromptRenderer — status listing plus the branch-aware prompt line."""

from __future__ import annotations

import os
import posixpath
import sys
from typing import TextIO

from tiger.process import ProcessRunner
from tiger.repository import RepositoryContext, RepositoryError
from tiger.shell.output import BLUE, CYAN, GREY, RED, RESET, YELLOW


def normalize_path_separators(path: str) -> str:
    """Rewrite backslashes to forward slashes for display."""
    return path.replace("\\", "/")


class PromptRenderer:
    """Writes the interactive prompt without a trailing newline."""

    def __init__(
        self,
        repo: RepositoryContext,
        runner: ProcessRunner,
        git: str = "git",
        out: TextIO | None = None,
    ) -> None:
        self._repo = repo
        self._runner = runner
        self._git = git
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def render(self) -> None:
        """Show working tree status, then the prompt.

        Outside a repository, prints a hint and a marker prompt instead and
        skips the status listing.
        """
        try:
            cwd = normalize_path_separators(os.getcwd())
        except FileNotFoundError:
            # working directory was deleted out from under the session
            cwd = ""
        try:
            if not cwd:
                raise RepositoryError("working directory no longer exists")
            root = normalize_path_separators(self._repo.work_tree_root())
        except RepositoryError:
            self.out.write(f'\nType "{BLUE}init{RESET}" to get started with git!\n')
            self.out.write(f"{RED}(not a git repository){RESET} {posixpath.basename(cwd)} % ")
            self.out.flush()
            return

        self.out.flush()
        self._runner.attach([self._git, "status", "-s", "-uall"])

        repo_name = posixpath.basename(root)
        relative = cwd.removeprefix(root)
        branch = self._repo.current_branch()
        self.out.write(
            f"{GREY}git@{RESET}{YELLOW}{branch}{RESET} {CYAN}{repo_name}{relative}{RESET} % "
        )
        self.out.flush()
