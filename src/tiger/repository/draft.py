"""DraftCommitCoordinator — commit messages composed ahead of time.

The draft lives at ``<root>/.git/COMMIT_DRAFTMSG``. A draft can be committed
directly, or handed to git as a commit template (``commit -t``). In the
template case git opens its own editor on a copy, so the draft is removed
shortly after the commit starts. There is no way to learn when git has read
the template, so the hand-off is timed: a fixed delay, not a signal.
"""

from __future__ import annotations

import concurrent.futures
import time
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from tiger.process import ProcessResult, ProcessRunner
from tiger.repository.context import RepositoryContext


class DraftCommitCoordinator:
    """Resolves, reads, and commits the on-disk draft message."""

    def __init__(
        self,
        repo: RepositoryContext,
        runner: ProcessRunner,
        git: str = "git",
        filename: str = "COMMIT_DRAFTMSG",
        handoff_delay: float = 0.1,
    ) -> None:
        self._repo = repo
        self._runner = runner
        self._git = git
        self._filename = filename
        self._handoff_delay = handoff_delay

    def draft_file(self) -> Path:
        """Return the draft path under the current worktree root.

        Raises:
            RepositoryError: If no worktree root can be resolved.
        """
        path = Path(self._repo.work_tree_root()) / ".git" / self._filename
        logger.debug("draft file: {}", path)
        return path

    @staticmethod
    def exists(path: Path) -> bool:
        """Return True if the draft can be opened.

        Only a missing file counts as absent; any other OSError propagates.
        """
        try:
            path.open("rb").close()
        except FileNotFoundError:
            return False
        return True

    @staticmethod
    def remove(path: Path) -> None:
        """Delete the draft; a draft that is already gone is fine."""
        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.debug("removed draft {}", path)

    def commit_draft(self, path: Path, args: Sequence[str]) -> ProcessResult:
        """Commit using an existing draft, then remove it.

        With no extra arguments the draft contents become the literal
        message. With any extra argument the draft is passed to git as a
        template and deleted after the hand-off delay while git runs.
        Either way the commit's own completion is awaited before returning.
        """
        if not args:
            try:
                # undecodable bytes and CRLF reach argv unchanged
                message = path.read_bytes().decode("utf-8", errors="surrogateescape")
                return self._runner.capture_output([self._git, "commit", "-m", message])
            finally:
                self.remove(path)

        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(
                self._runner.capture_output, [self._git, "commit", "-t", str(path)]
            )
            try:
                time.sleep(self._handoff_delay)
            finally:
                self.remove(path)
            return future.result()
